from contextlib import contextmanager
import threading
import tempfile
import logging
import fcntl
import json
import os

from vertex.errors import LedgerCorrupt, StorageOperationFailed

logger = logging.getLogger(__name__)


class JournalLedger:
    """
    Published journals kept as one pretty-printed JSON array on disk.

    Every append reads the whole file, appends in memory and rewrites it.
    With locking enabled the cycle holds a thread lock plus an flock on a
    sidecar ``.lock`` file, so concurrent appends from threads or worker
    processes are never lost. Rewrites go through a temporary file and
    ``os.replace`` so a crash mid-write leaves the previous array intact.
    """

    def __init__(self, path, locking=True):
        self.path = path
        self.lock_path = f"{path}.lock"
        self.locking = locking
        self._thread_lock = threading.Lock()
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)

    @contextmanager
    def _exclusive(self):
        if not self.locking:
            yield
            return

        with self._thread_lock:
            with open(self.lock_path, "w") as lock_file:
                fcntl.flock(lock_file, fcntl.LOCK_EX)
                try:
                    yield
                finally:
                    fcntl.flock(lock_file, fcntl.LOCK_UN)

    def _read(self):
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = f.read()
        except FileNotFoundError:
            return []
        except UnicodeDecodeError as e:
            logger.error(f"Admin journals file is not valid UTF-8: {e}")
            raise LedgerCorrupt() from e
        except OSError as e:
            logger.error(f"Error reading admin journals file: {e}")
            raise StorageOperationFailed("Error reading journal data") from e

        if not data:
            return []

        try:
            journals = json.loads(data)
        except ValueError as e:
            logger.error(f"Error parsing admin journals: {e}")
            raise LedgerCorrupt() from e

        if not isinstance(journals, list):
            logger.error(f"Admin journals file holds {type(journals).__name__}, expected a list")
            raise LedgerCorrupt()
        return journals

    def _write(self, journals):
        directory = os.path.dirname(os.path.abspath(self.path))
        fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".adminadd-", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(journals, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error writing admin journals file: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageOperationFailed("Error writing to file") from e

    def entries(self):
        return self._read()

    def append(self, entry):
        with self._exclusive():
            journals = self._read()
            journals.append(entry)
            self._write(journals)
        return len(journals)

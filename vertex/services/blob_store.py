from botocore.exceptions import BotoCoreError, ClientError
from werkzeug.utils import secure_filename
from dataclasses import dataclass
import posixpath
import logging
import uuid
import os

from vertex.errors import StorageOperationFailed

logger = logging.getLogger(__name__)

# Relative directory per upload role
ROLE_DIRECTORIES = {
    "image": posixpath.join("journals", "images"),
    "file": posixpath.join("journals", "files"),
}


@dataclass(frozen=True)
class StoredBlob:
    role: str
    path: str
    original_name: str
    content_type: str = None

    def to_dict(self):
        return {
            "role": self.role,
            "path": self.path,
            "original_name": self.original_name,
            "content_type": self.content_type,
        }


def generate_blob_name(original_name):
    """Random UUID name keeping the original extension."""
    extension = os.path.splitext(secure_filename(original_name or ""))[1]
    return f"{uuid.uuid4()}{extension}"


def blob_path(role, original_name):
    if role not in ROLE_DIRECTORIES:
        raise ValueError(f"Unknown upload role: {role}")
    return posixpath.join(ROLE_DIRECTORIES[role], generate_blob_name(original_name))


class BlobStore:
    """Stores uploaded payloads under generated names, keyed by role."""

    def save(self, role, upload):
        raise NotImplementedError

    def exists(self, path):
        raise NotImplementedError


class LocalBlobStore(BlobStore):
    def __init__(self, root):
        self.root = root
        for directory in ROLE_DIRECTORIES.values():
            os.makedirs(self.resolve(directory), exist_ok=True)

    def resolve(self, path):
        return os.path.join(self.root, *path.split("/"))

    def save(self, role, upload):
        path = blob_path(role, upload.filename)
        try:
            upload.save(self.resolve(path))
        except OSError as e:
            logger.error(f"Error writing {role} upload {upload.filename}: {e}")
            raise StorageOperationFailed(f"Failed to store {role} upload") from e

        logger.info(f"Stored {role} upload {upload.filename} as {path}")
        return StoredBlob(role, path, upload.filename, upload.content_type)

    def exists(self, path):
        return os.path.isfile(self.resolve(path))


class S3BlobStore(BlobStore):
    def __init__(self, s3_client, bucket_name):
        self.s3_client = s3_client
        self.bucket_name = bucket_name

    def save(self, role, upload):
        path = blob_path(role, upload.filename)
        extra = {"ContentType": upload.content_type} if upload.content_type else {}
        try:
            self.s3_client.put_object(
                Bucket=self.bucket_name,
                Key=path,
                Body=upload.stream,
                **extra
            )
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error uploading {role} file {upload.filename}: {e}")
            raise StorageOperationFailed(f"Failed to store {role} upload") from e

        logger.info(f"Uploaded {role} file {upload.filename} as s3://{self.bucket_name}/{path}")
        return StoredBlob(role, path, upload.filename, upload.content_type)

    def exists(self, path):
        try:
            self.s3_client.head_object(Bucket=self.bucket_name, Key=path)
        except ClientError as e:
            if e.response['Error']['Code'] in ("404", "NoSuchKey", "NotFound"):
                return False
            raise
        return True

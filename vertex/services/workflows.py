from datetime import datetime, timezone
import logging
import uuid

from vertex.errors import DuplicateUser, InvalidCredentials, MissingField
from vertex.services.user_store import serialize_user

logger = logging.getLogger(__name__)

JOURNAL_FIELDS = ("journalName", "description", "issn")


def require_password_and_identifier(data):
    if not isinstance(data, dict):
        raise MissingField("Request body must be a JSON object")
    if not data.get("password") or not isinstance(data["password"], str):
        raise MissingField("Missing required field: password")
    if data.get("email") is None and data.get("username") is None:
        raise MissingField("Missing required field: email or username")
    for field in ("email", "username"):
        if data.get(field) is not None and not isinstance(data[field], str):
            raise MissingField(f"Field {field} must be a string")


class RegistrationWorkflow:
    def __init__(self, user_store, hasher):
        self.user_store = user_store
        self.hasher = hasher

    def register(self, data):
        require_password_and_identifier(data)

        existing = self.user_store.find_by_email_or_username(data.get("email"), data.get("username"))
        if existing:
            logger.warning("Registration rejected, email or username already taken")
            raise DuplicateUser()

        new_user = {
            **data,
            "password": self.hasher.hash(data["password"]),
        }
        user_id = self.user_store.insert(new_user)
        logger.info(f"New user created with id: {user_id}")
        return user_id


class LoginWorkflow:
    def __init__(self, user_store, hasher):
        self.user_store = user_store
        self.hasher = hasher

    def login(self, data):
        require_password_and_identifier(data)

        user = self.user_store.find_by_email_or_username(data.get("email"), data.get("username"))
        if not user:
            raise InvalidCredentials()

        if not self.hasher.verify(data["password"], user.get("password")):
            logger.warning(f"Failed login for user {user.get('_id')}")
            raise InvalidCredentials()

        logger.info(f"User {user.get('_id')} logged in")
        return serialize_user(user)


class PublishWorkflow:
    def __init__(self, upload_receiver, ledger):
        self.upload_receiver = upload_receiver
        self.ledger = ledger

    def publish(self, form, files):
        blobs = self.upload_receiver.receive(files)

        journal = {
            "id": str(uuid.uuid4()),
            **{field: form.get(field) for field in JOURNAL_FIELDS},
            "imagePath": blobs["image"].path,
            "filePath": blobs["file"].path,
            "publishedAt": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        }

        count = self.ledger.append(journal)
        logger.info(f"Journal {journal['id']} published, ledger now holds {count} entries")
        return journal

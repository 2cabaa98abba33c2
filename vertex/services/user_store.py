from pymongo.errors import DuplicateKeyError, PyMongoError
import pymongo
import logging

from vertex.errors import DuplicateUser, StorageOperationFailed

logger = logging.getLogger(__name__)

IDENTIFIER_FIELDS = ("email", "username")


class UserStore:
    """Credential lookups and inserts against the users collection."""

    def __init__(self, collection):
        self.collection = collection

    def ensure_indexes(self):
        try:
            for field in IDENTIFIER_FIELDS:
                self.collection.create_index(
                    [(field, pymongo.ASCENDING)], unique=True, sparse=True, name=f"{field}_unique"
                )
        except PyMongoError as e:
            logger.error(f"Error creating user indexes: {e}")
            raise StorageOperationFailed("Failed to prepare users collection") from e

    def find_by_email_or_username(self, email=None, username=None):
        # Only supplied identifiers take part, {"email": None} would match records without one
        clauses = []
        if email is not None:
            clauses.append({"email": {"$eq": email}})
        if username is not None:
            clauses.append({"username": {"$eq": username}})
        if not clauses:
            return None

        try:
            return self.collection.find_one({"$or": clauses})
        except PyMongoError as e:
            logger.error(f"Error looking up user: {e}")
            raise StorageOperationFailed("Failed to look up user") from e

    def insert(self, user):
        try:
            result = self.collection.insert_one(dict(user))
        except DuplicateKeyError as e:
            raise DuplicateUser() from e
        except PyMongoError as e:
            logger.error(f"Error inserting user: {e}")
            raise StorageOperationFailed("Failed to register user") from e
        return str(result.inserted_id)


def serialize_user(user):
    """Public projection of a stored user: stringified _id, no password hash."""
    data = {key: value for key, value in user.items() if key != "password"}
    if "_id" in data:
        data["_id"] = str(data["_id"])
    return data

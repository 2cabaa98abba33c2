class VertexError(Exception):
    """Base class for failures that are reported to the HTTP caller."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateUser(VertexError):
    status_code = 400
    message = "User already registered"


class InvalidCredentials(VertexError):
    status_code = 401
    message = "Invalid credentials"


class MissingField(VertexError):
    status_code = 400
    message = "Missing required field"


class MissingUpload(VertexError):
    status_code = 400
    message = "Both imageFile and fileFile are required"


class StorageUnavailable(VertexError):
    """Raised at startup when the document store cannot be reached."""

    status_code = 503
    message = "Storage unavailable"


class StorageOperationFailed(VertexError):
    status_code = 500
    message = "Storage operation failed"


class PasswordHashingFailed(VertexError):
    status_code = 500
    message = "Failed to hash password"


class LedgerCorrupt(VertexError):
    status_code = 500
    message = "Error parsing journal data"

from dotenv import load_dotenv
import os

load_dotenv()

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    MONGODB_URI = os.getenv("MONGODB_URI")
    MONGODB_DB = os.getenv("MONGODB_DB", "vertex")
    USERS_COLLECTION = os.getenv("USERS_COLLECTION", "users")

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3001"))

    CONTENT_ROOT = os.getenv("CONTENT_ROOT", PROJECT_ROOT)
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", str(200 * 1024 * 1024)))

    BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "10"))

    # "local" writes under CONTENT_ROOT/journals, "s3" writes to AWS_BUCKET_NAME
    BLOB_BACKEND = os.getenv("BLOB_BACKEND", "local")
    AWS_ACCESS_KEY_ID = os.getenv("AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY = os.getenv("AWS_SECRET_ACCESS_KEY")
    AWS_REGION = os.getenv("AWS_REGION")
    AWS_BUCKET_NAME = os.getenv("AWS_BUCKET_NAME")

    LEDGER_LOCKING = env_flag("LEDGER_LOCKING", True)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

from pymongo.errors import PyMongoError
import pymongo
import logging

from vertex.errors import StorageUnavailable

logger = logging.getLogger(__name__)


def connect(uri, server_selection_timeout_ms=5000):
    client = pymongo.MongoClient(uri, serverSelectionTimeoutMS=server_selection_timeout_ms)

    try:
        client.admin.command('ping')
        logger.info("Pinged your deployment. You successfully connected to MongoDB!")
    except PyMongoError as e:
        logger.error(f"Error connecting to MongoDB: {e}")
        client.close()
        raise StorageUnavailable(f"Failed to connect to MongoDB: {e}") from e

    return client

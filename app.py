from flask import Flask, jsonify
from flask_cors import CORS
from types import SimpleNamespace
import logging
import boto3
import sys
import os

from vertex.config.settings import Config
from vertex.config import mongodb
from vertex.errors import StorageOperationFailed, StorageUnavailable
from vertex.services.password_hasher import PasswordHasher
from vertex.services.user_store import UserStore
from vertex.services.blob_store import LocalBlobStore, S3BlobStore
from vertex.services.upload_receiver import UploadReceiver
from vertex.services.journal_ledger import JournalLedger
from vertex.services.workflows import RegistrationWorkflow, LoginWorkflow, PublishWorkflow

# Import controllers
from vertex.controller.auth_controller import auth_controller
from vertex.controller.journal_controller import journal_controller
from vertex.controller.static_controller import static_controller

logger = logging.getLogger("vertex")


def create_blob_store(config):
    if config["BLOB_BACKEND"] == "s3":
        s3_client = boto3.client(
            's3',
            aws_access_key_id=config["AWS_ACCESS_KEY_ID"],
            aws_secret_access_key=config["AWS_SECRET_ACCESS_KEY"],
            region_name=config["AWS_REGION"]
        )
        return S3BlobStore(s3_client, config["AWS_BUCKET_NAME"])
    return LocalBlobStore(config["CONTENT_ROOT"])


def create_app(database, overrides=None, blob_store=None):
    """
    Build the Flask app around an already connected database.

    The caller owns the MongoDB client; everything the routes need is
    constructed here and stored on ``app.extensions["vertex"]``.
    """
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)
    CORS(app)

    user_store = UserStore(database[app.config["USERS_COLLECTION"]])
    try:
        user_store.ensure_indexes()
    except StorageOperationFailed as e:
        # Registration still pre-checks duplicates without the indexes
        logger.warning(f"Unique user indexes unavailable: {e}")
    hasher = PasswordHasher(rounds=app.config["BCRYPT_ROUNDS"])
    if blob_store is None:
        blob_store = create_blob_store(app.config)
    ledger = JournalLedger(
        os.path.join(app.config["CONTENT_ROOT"], "journals", "adminadd.json"),
        locking=app.config["LEDGER_LOCKING"]
    )

    app.extensions["vertex"] = SimpleNamespace(
        user_store=user_store,
        blob_store=blob_store,
        ledger=ledger,
        registration=RegistrationWorkflow(user_store, hasher),
        login=LoginWorkflow(user_store, hasher),
        publish=PublishWorkflow(UploadReceiver(blob_store), ledger),
    )

    # Register blueprints, static last so its catch-all never shadows API routes
    app.register_blueprint(auth_controller)
    app.register_blueprint(journal_controller)

    @app.route('/api/health', methods=['GET'])
    def health_check():
        return jsonify({"status": "healthy", "message": "API is running"}), 200

    @app.errorhandler(413)
    def request_too_large(e):
        return jsonify({"success": False, "message": "Request body too large"}), 413

    app.register_blueprint(static_controller)
    return app


def main():
    logging.basicConfig(level=Config.LOG_LEVEL)

    if not Config.MONGODB_URI:
        logger.error("MongoDB URI is missing. Set the MONGODB_URI environment variable.")
        sys.exit(1)

    try:
        client = mongodb.connect(Config.MONGODB_URI)
    except StorageUnavailable as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        sys.exit(1)

    try:
        app = create_app(client[Config.MONGODB_DB])
        logger.info(f"Server is running on port {Config.PORT}")
        app.run(host=Config.HOST, port=Config.PORT)
    finally:
        client.close()


if __name__ == '__main__':
    main()

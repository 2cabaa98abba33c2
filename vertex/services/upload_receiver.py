import logging

from vertex.errors import MissingUpload

logger = logging.getLogger(__name__)

# Multipart part name -> upload role
UPLOAD_PARTS = {
    "imageFile": "image",
    "fileFile": "file",
}


class UploadReceiver:
    def __init__(self, blob_store):
        self.blob_store = blob_store

    def receive(self, files):
        """
        Store the image and file parts of a publish request.

        Both parts are checked before anything is written, so a request
        missing one of them leaves no blob behind.
        """
        uploads = {}
        for part, role in UPLOAD_PARTS.items():
            upload = files.get(part)
            if upload is None or not upload.filename:
                logger.warning(f"Publish request without {part}")
                raise MissingUpload(f"Missing required upload: {part}")
            uploads[role] = upload

        return {role: self.blob_store.save(role, upload) for role, upload in uploads.items()}

"""
Shared fixtures.

The app is built around a mongomock database and a temporary content
root, so tests never touch a real MongoDB deployment or the project tree.
"""
import io

import mongomock
import pytest

from app import create_app


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    yield client
    client.close()


@pytest.fixture
def database(mongo_client):
    return mongo_client["vertex_test"]


@pytest.fixture
def content_root(tmp_path):
    return tmp_path / "site"


@pytest.fixture
def app(database, content_root):
    app = create_app(database, {
        "TESTING": True,
        "CONTENT_ROOT": str(content_root),
        "BCRYPT_ROUNDS": 4,
        "BLOB_BACKEND": "local",
        "LEDGER_LOCKING": True,
    })
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def services(app):
    return app.extensions["vertex"]


@pytest.fixture
def journal_form():
    """Build a fresh multipart body for POST /uploadAdminJournal."""
    def build(name="Vertex Review", image=b"\x89PNG fake", document=b"%PDF-1.4 fake", **extra):
        data = {
            "journalName": name,
            "description": "Quarterly review",
            "issn": "1234-5678",
        }
        if image is not None:
            data["imageFile"] = (io.BytesIO(image), "cover.png")
        if document is not None:
            data["fileFile"] = (io.BytesIO(document), "issue.pdf")
        data.update(extra)
        return data
    return build

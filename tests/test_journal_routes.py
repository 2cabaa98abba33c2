import io
import json


def ledger_file(content_root):
    return content_root / "journals" / "adminadd.json"


def test_publish_journal(client, content_root, journal_form):
    response = client.post("/uploadAdminJournal", data=journal_form(), content_type="multipart/form-data")

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["message"] == "Journal published successfully!"

    journal = body["journal"]
    assert journal["journalName"] == "Vertex Review"
    assert journal["issn"] == "1234-5678"
    assert (content_root / journal["imagePath"]).read_bytes() == b"\x89PNG fake"
    assert (content_root / journal["filePath"]).read_bytes() == b"%PDF-1.4 fake"
    assert json.loads(ledger_file(content_root).read_text()) == [journal]


def test_published_files_are_served(client, journal_form):
    journal = client.post(
        "/uploadAdminJournal", data=journal_form(), content_type="multipart/form-data"
    ).get_json()["journal"]

    response = client.get("/" + journal["imagePath"])
    assert response.status_code == 200
    assert response.data == b"\x89PNG fake"


def test_sequential_publishes_keep_order(client, journal_form):
    names = [f"Volume {i}" for i in range(4)]
    for name in names:
        client.post("/uploadAdminJournal", data=journal_form(name=name), content_type="multipart/form-data")

    data = client.get("/api/journals").get_json()["data"]
    assert [journal["journalName"] for journal in data] == names
    assert len({journal["id"] for journal in data}) == 4


def test_missing_file_part(client, content_root, journal_form):
    response = client.post(
        "/uploadAdminJournal", data=journal_form(document=None), content_type="multipart/form-data"
    )

    assert response.status_code == 400
    assert response.get_json()["success"] is False
    assert not ledger_file(content_root).exists()
    assert list((content_root / "journals" / "images").iterdir()) == []


def test_corrupt_ledger(client, content_root, journal_form):
    ledger_file(content_root).write_text("{broken")

    response = client.post("/uploadAdminJournal", data=journal_form(), content_type="multipart/form-data")

    assert response.status_code == 500
    assert response.get_json() == {"success": False, "message": "Error parsing journal data"}
    assert ledger_file(content_root).read_text() == "{broken"


def test_list_journals_empty(client):
    response = client.get("/api/journals")
    assert response.status_code == 200
    assert response.get_json() == {"data": []}


def test_request_body_ceiling(app, client):
    app.config["MAX_CONTENT_LENGTH"] = 1024
    data = {
        "journalName": "Too big",
        "imageFile": (io.BytesIO(b"x" * 4096), "cover.png"),
        "fileFile": (io.BytesIO(b"y"), "issue.pdf"),
    }

    response = client.post("/uploadAdminJournal", data=data, content_type="multipart/form-data")

    assert response.status_code == 413
    assert response.get_json()["success"] is False


def test_undecodable_ledger(client, content_root, journal_form):
    ledger_file(content_root).write_bytes(b'[{"id": "\xff"}]')

    listing = client.get("/api/journals")
    assert listing.status_code == 500
    assert listing.get_json() == {"message": "Error parsing journal data"}

    response = client.post("/uploadAdminJournal", data=journal_form(), content_type="multipart/form-data")
    assert response.status_code == 500
    assert response.get_json() == {"success": False, "message": "Error parsing journal data"}

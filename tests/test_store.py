"""Tests for the JSON file store."""

import json

import pytest

from lab_access_portal.app.core.errors import StorageError
from lab_access_portal.app.core.store import JSONFileStore
from lab_access_portal.app.schemas.lab_request import LabRequest


def make_request(request_id="abc", **overrides):
    fields = {
        "id": request_id,
        "name": "Ann",
        "email": "ann@x.com",
        "labName": "NLP-Lab",
        "status": "pending",
        "createdAt": "2026-01-01T10:00:00.000Z",
    }
    fields.update(overrides)
    return LabRequest.model_validate(fields)


def test_init_creates_empty_document(tmp_path):
    path = tmp_path / "nested" / "db.json"
    store = JSONFileStore(path)
    store.init()
    assert json.loads(path.read_text()) == {"requests": []}
    assert store.load() == []


def test_init_keeps_existing_file(tmp_path):
    path = tmp_path / "db.json"
    store = JSONFileStore(path)
    store.init()
    store.save([make_request()])
    store.init()
    assert [r.id for r in store.load()] == ["abc"]


def test_init_fails_when_directory_cannot_be_created(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    store = JSONFileStore(blocker / "db.json")
    with pytest.raises(StorageError):
        store.init()


def test_save_is_pretty_printed_and_omits_unset_fields(store):
    store.save([make_request()])
    text = store.path.read_text()
    assert text.startswith('{\n  "requests": [')
    entry = json.loads(text)["requests"][0]
    assert entry["labName"] == "NLP-Lab"
    assert entry["createdAt"] == "2026-01-01T10:00:00.000Z"
    assert "labUrl" not in entry
    assert "approvedAt" not in entry


def test_save_preserves_insertion_order(store):
    store.save([make_request("b"), make_request("a"), make_request("c")])
    assert [r.id for r in store.load()] == ["b", "a", "c"]


def test_save_leaves_no_temp_files(store):
    store.save([make_request()])
    assert [p.name for p in store.path.parent.iterdir()] == ["db.json"]


def test_load_missing_file_starts_empty(tmp_path):
    path = tmp_path / "db.json"
    store = JSONFileStore(path)
    assert store.load() == []
    assert json.loads(path.read_text()) == {"requests": []}


def test_load_after_file_deleted_starts_empty(store):
    store.save([make_request()])
    store.path.unlink()
    assert store.load() == []


def test_load_corrupt_json_raises(data_file):
    data_file.write_text("{not json")
    with pytest.raises(StorageError):
        JSONFileStore(data_file).load()


def test_load_without_requests_array_raises(data_file):
    data_file.write_text('{"items": []}')
    with pytest.raises(StorageError):
        JSONFileStore(data_file).load()


def test_load_malformed_entry_raises(data_file):
    data_file.write_text('{"requests": [{"id": "x"}]}')
    with pytest.raises(StorageError):
        JSONFileStore(data_file).load()

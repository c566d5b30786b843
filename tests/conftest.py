import json

import pytest
from fastapi.testclient import TestClient

from lab_access_portal.app.core.config import Settings
from lab_access_portal.app.core.store import JSONFileStore
from lab_access_portal.app.main import create_app

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "s3cret"


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def settings(data_file):
    return Settings(
        data_file=str(data_file),
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
    )


@pytest.fixture
def store(data_file):
    store = JSONFileStore(data_file)
    store.init()
    return store


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def admin_auth():
    return {"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD}


@pytest.fixture
def read_document(data_file):
    def _read():
        return json.loads(data_file.read_text(encoding="utf-8"))

    return _read


@pytest.fixture
def sample_request():
    return {"name": "Ann", "email": "Ann@x.com", "labName": "NLP-Lab"}

import pytest
from fastapi.testclient import TestClient

from main import app
from utils.helpers import get_storage_dir


@pytest.fixture
def pdf_bytes():
    return b"%PDF-1.4\n\n"


@pytest.fixture
def xlsx_bytes():
    return b"PK\x03\x04" + bytes(range(256)) * 40  # spans several chunks


@pytest.fixture
def storage_dir(tmp_path):
    app.dependency_overrides[get_storage_dir] = lambda: tmp_path
    yield tmp_path
    app.dependency_overrides.pop(get_storage_dir, None)


@pytest.fixture
def stored_files(storage_dir, pdf_bytes, xlsx_bytes):
    (storage_dir / "ejemplo.pdf").write_bytes(pdf_bytes)
    (storage_dir / "ejemplo.xlsx").write_bytes(xlsx_bytes)
    return storage_dir


@pytest.fixture
def opened_files(monkeypatch):
    """Records every file handle the download service opens."""
    from core import download_service

    opened = []

    def tracking_open(path, mode):
        f = open(path, mode)
        opened.append(f)
        return f

    monkeypatch.setattr(download_service, "open", tracking_open, raising=False)
    return opened


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def anyio_backend():
    return "asyncio"

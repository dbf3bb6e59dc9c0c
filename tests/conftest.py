# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from nazarban.config import settings
from nazarban.routers.admin import login_limiter

ADMIN_PASSWORD = "s3cret"


@pytest.fixture
def content_dir(tmp_path, monkeypatch):
    """Point the content store at a temp dir and set a known admin password."""
    monkeypatch.setattr(settings, "CONTENT_DIR", tmp_path)
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", ADMIN_PASSWORD)
    login_limiter.reset()
    yield tmp_path
    login_limiter.reset()


@pytest.fixture
def client(content_dir):
    from nazarban.main import app

    with TestClient(app) as c:
        yield c

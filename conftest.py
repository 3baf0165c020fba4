import pytest
from fastapi.testclient import TestClient

from slidestudio.config import settings


@pytest.fixture
def storage(tmp_path, monkeypatch):
    """Point slide and feedback storage at a temporary directory."""
    monkeypatch.setattr(settings, "PUBLIC_DIR", str(tmp_path / "public"))
    monkeypatch.setattr(settings, "FEEDBACK_DIR", str(tmp_path / "feedback"))
    monkeypatch.setattr(settings, "PREFERRED_SLIDE_DATE", "2026-01-06")
    return tmp_path


@pytest.fixture
def client():
    from slidestudio.main import app
    return TestClient(app)

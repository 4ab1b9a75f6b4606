"""
Pytest configuration and shared fixtures.
"""

import sys
from datetime import date, datetime
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from models.events import Event  # noqa: E402

API_KEY = "test-key"


@pytest.fixture
def day0():
    """Reference date used to resolve clock times."""
    return date(2025, 3, 10)


@pytest.fixture
def sample_event(day0):
    """Sample event for testing."""
    return Event(
        title="Meeting",
        start=datetime.combine(day0, datetime.min.time()).replace(hour=9),
        end=datetime.combine(day0, datetime.min.time()).replace(hour=10),
    )


@pytest.fixture
def sample_events(sample_event, day0):
    """Two abutting events sharing hour 10."""
    return [
        sample_event,
        Event(
            title="Review",
            start=datetime.combine(day0, datetime.min.time()).replace(hour=10),
            end=datetime.combine(day0, datetime.min.time()).replace(hour=11),
        ),
    ]


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Request log database in a temp directory."""
    from core import config
    from core.database import init_database

    path = tmp_path / "db" / "fast-calendar.db"
    monkeypatch.setattr(config, "DB_PATH", path)
    init_database(path)
    return path


@pytest.fixture
def client(db_path, monkeypatch):
    """API test client with a configured key and a temp request log."""
    from fastapi.testclient import TestClient

    from api.main import app
    from core import config

    monkeypatch.setattr(config, "PLANNER_API_KEY", API_KEY)
    return TestClient(app, headers={"X-API-Key": API_KEY})

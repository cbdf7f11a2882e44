"""
HotelHub Backend: Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session:    AsyncMock standing in for AsyncSession
    ├── mock_upload_sink:   AsyncMock standing in for UploadSink
    ├── temp_storage:       Temporary upload directory
    ├── sample_image_bytes: Minimal JPEG bytes for upload tests
    ├── test_app:           Real app wired to a fresh SQLite file (aiosqlite)
    └── test_client:        HTTPX AsyncClient bound to test_app via ASGITransport
"""

import os
import tempfile

# Must run before any hotelhub import: the module-level app in hotelhub.main
# builds its Database from these values.
_TEST_ROOT = tempfile.mkdtemp(prefix="hotelhub_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_TEST_ROOT, 'default.db')}"
os.environ["UPLOAD_DIR"] = os.path.join(_TEST_ROOT, "uploads")
os.environ["LOG_LEVEL"] = "WARNING"

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hotelhub.config import Settings
from hotelhub.main import create_app
from hotelhub.services.upload_service import UploadSink


# ══════════════════════════════════════════════════════════════════════════
# Unit-test doubles
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalars.return_value.first.return_value = row
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def mock_upload_sink():
    """UploadSink double: store_all returns whatever the test configures."""
    sink = MagicMock(spec=UploadSink)
    sink.store_all = AsyncMock(return_value=[])
    sink.cleanup = AsyncMock()
    return sink


@pytest.fixture
def temp_storage(tmp_path):
    """A fresh upload directory per test."""
    storage_dir = tmp_path / "uploads"
    storage_dir.mkdir()
    return str(storage_dir)


@pytest.fixture
def sample_image_bytes():
    """Minimal JPEG: SOI marker + JFIF header + EOI marker."""
    return (
        b'\xff\xd8\xff\xe0\x00\x10JFIF\x00\x01\x01\x00\x00\x01\x00\x01\x00\x00'
        b'\xff\xd9'
    )


@pytest.fixture
def hotel_row():
    """Stand-in for a Hotel row returned by a RETURNING / SELECT statement."""
    return SimpleNamespace(
        id=1,
        slug="grand-1",
        images=["uploads/images-1700000000000-1"],
        title="Grand Hotel",
        description="By the sea",
        guest_count=4,
        bedroom_count=2,
        bathroom_count=1,
        amenities={"wifi": True},
        host_information={"name": "Ana"},
        address="1 Harbour Road",
        latitude=41.15,
        longitude=-8.61,
    )


@pytest.fixture
def room_row():
    """Stand-in for a Room row."""
    return SimpleNamespace(
        id=7,
        hotel_id=1,
        slug="101",
        images=["https://cdn.example.com/101.jpg"],
        title="Suite",
        bedroom_count=2,
    )


# ══════════════════════════════════════════════════════════════════════════
# API fixtures (real app, real SQLite database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'hotelhub.db'}",
        upload_dir=str(tmp_path / "uploads"),
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def test_app(test_settings):
    """App with its own database file; tables created, engine disposed after."""
    app = create_app(settings=test_settings)
    await app.state.database.create_schema()
    yield app
    await app.state.database.dispose()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient talking to test_app in-process.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/hotel")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

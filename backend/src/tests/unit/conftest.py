"""
Shared pytest fixtures and path setup for unit tests.
"""

import os
import sys
import tempfile
from pathlib import Path

# Set environment defaults BEFORE any community_hub imports so the settings
# never point at the developer's database or log directory.
_TEST_ROOT = Path(tempfile.mkdtemp(prefix="community_hub_tests_"))
os.environ.setdefault("HUB_DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_ROOT / 'default.db'}")
os.environ.setdefault("HUB_LOG_DIR", str(_TEST_ROOT / "logs"))
os.environ.setdefault("HUB_PUBLIC_DIR", str(_TEST_ROOT / "public"))

# Add backend/src to sys.path so community_hub.* imports work when running pytest from repo root.
PROJECT_SRC = Path(__file__).resolve().parents[2]
if str(PROJECT_SRC) not in sys.path:
    sys.path.insert(0, str(PROJECT_SRC))

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from community_hub.core.config import reset_settings_instance
from community_hub.core.database import Base, build_async_engine, build_session_factory
from community_hub.models.registry import register_all_models


@pytest.fixture
def database_url(tmp_path) -> str:
    """A SQLite file private to one test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'hub_test.db'}"


@pytest_asyncio.fixture
async def session_factory(database_url):
    """Session factory bound to a freshly created schema."""
    register_all_models()
    engine = build_async_engine(database_url)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield build_session_factory(engine)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def client(database_url, monkeypatch):
    """TestClient for a fresh app; entering it runs the lifespan, which creates the tables."""
    monkeypatch.setenv("HUB_DATABASE_URL", database_url)
    reset_settings_instance()

    from community_hub.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client
    reset_settings_instance()

"""Shared fixtures: a throwaway SQLite database per test."""

import pytest
import pytest_asyncio

from clearance_scout.cache.observation_cache import ObservationCache
from clearance_scout.data.stores import store_records
from clearance_scout.db.session import create_db_engine, create_session_factory, init_models
from clearance_scout.db.storage import ScanStorage
from clearance_scout.geo.resolver import ZipResolver


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = create_db_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def db_session_factory(db_engine):
    return create_session_factory(db_engine)


@pytest.fixture
def storage(db_session_factory):
    return ScanStorage(db_session_factory)


@pytest.fixture
def observation_cache(db_session_factory):
    return ObservationCache(db_session_factory, ttl_minutes=60, max_size=100)


@pytest_asyncio.fixture
async def seeded_storage(storage):
    await storage.seed_store_locations(store_records())
    return storage


@pytest.fixture
def resolver():
    return ZipResolver.builtin(store_records())

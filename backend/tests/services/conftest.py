"""Service test fixtures — async DB, FastAPI test client, and controllable fetchers.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Settings pinned to Europe/Warsaw so display strings are deterministic

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - ControlledFetcher gates each URL on an asyncio.Event: tests decide when
      (and whether) a resource "arrives"
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from ulogger.api.routes.assets import get_resource_loader
from ulogger.config import Settings, get_settings
from ulogger.db.base import Base
from ulogger.infrastructure.database import get_db, DatabaseSessionManager
from ulogger.models.layer import Layer
from ulogger.models.position import Position
from ulogger.models.track import Track
from ulogger.models.user import User
from ulogger.services.resource_loader import ResourceLoader
import ulogger.infrastructure.database as db_module
from ulogger.main import app
from tests.services.fake_fetcher import ControlledFetcher


@pytest.fixture
def fetcher():
    return ControlledFetcher()


@pytest.fixture
def loader(fetcher):
    return ResourceLoader(fetcher)


@pytest.fixture
def test_settings():
    return Settings(
        display_timezone="Europe/Warsaw",
        speed_color_start="#000000",
        speed_color_stop="#ffffff",
        speed_scale_max=20.0,
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory, test_settings, loader):
    """FastAPI test client with DB, settings and loader dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_resource_loader] = lambda: loader

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_track(test_db):
    """One user with one track of three positions (Warsaw, summer 2017)."""
    user = User(login="demo", password="x")
    test_db.add(user)
    await test_db.flush()
    track = Track(user_id=user.id, name="Morning ride", comment="test")
    test_db.add(track)
    await test_db.flush()
    for minute, (lat, lon, speed) in enumerate([
        (52.2297, 21.0122, 0.0),
        (52.2300, 21.0130, 5.0),
        (52.2310, 21.0150, None),
    ]):
        test_db.add(Position(
            user_id=user.id, track_id=track.id,
            time=datetime(2017, 6, 14, 9, 42 + minute, 19, tzinfo=timezone.utc),
            latitude=lat, longitude=lon, speed=speed, altitude=100.0 + minute,
        ))
    await test_db.commit()
    return track


@pytest.fixture
async def seed_layers(test_db):
    test_db.add_all([
        Layer(name="OpenTopoMap", url="https://tile.opentopomap.org/{z}/{x}/{y}.png", priority=5),
        Layer(name="OpenStreetMap", url="https://tile.openstreetmap.org/{z}/{x}/{y}.png", priority=1),
    ])
    await test_db.commit()

"""Infrastructure test fixtures - async SQLite DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - db_manager patched so readiness checks use the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository tests
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from shelter_api.db.base import Base
from shelter_api.infrastructure.database import get_db, DatabaseSessionManager
from shelter_api.models.adopter import Adopter
from shelter_api.models.dog import Dog
import shelter_api.infrastructure.database as db_module
from shelter_api.main import app


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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

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
async def seed_adopter(test_db):
    """Adopter with one dog, plus an unadopted dog."""
    adopter = Adopter(name="Ada Lovelace", email="ada@example.com")
    test_db.add(adopter)
    await test_db.commit()
    await test_db.refresh(adopter)
    test_db.add_all([
        Dog(name="Rex", breed="Beagle", adopter_id=adopter.id),
        Dog(name="Fido", breed="Mutt"),
    ])
    await test_db.commit()
    return adopter

"""Root conftest — shared test configuration and database fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB session
    - Test-only Widget model registered on Base.metadata before create_all

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for CRUD routes
    - db_manager patched: readiness probe uses db_manager directly
"""

import os

# Never touch a real database from tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

import crud_architecture.infrastructure.database as db_module  # noqa: E402
from crud_architecture.db.base import Base  # noqa: E402
from crud_architecture.infrastructure.database import (  # noqa: E402
    get_db, DatabaseSessionManager,
)
from crud_architecture.main import app  # noqa: E402
import tests.widgets  # noqa: E402,F401  (registers the widgets table)


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
def override_db(test_engine, test_session_factory):
    """Route get_db and db_manager to the test engine; returns the target app setter."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    patched = []

    def apply(target_app):
        target_app.dependency_overrides[get_db] = override_get_db
        patched.append(target_app)
        return target_app

    yield apply

    for target_app in patched:
        target_app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def client(override_db):
    """FastAPI test client for the main app with DB dependency overridden."""
    override_db(app)
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

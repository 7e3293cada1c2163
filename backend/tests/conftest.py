"""
Layered API — Test Configuration (conftest.py)
===============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── memory_settings: both entities on the in-memory backend
    ├── sqlite_settings: both entities on an aiosqlite file in tmp_path
    ├── sqlite_engine: engine with the users/orders tables created
    ├── session_factory: session factory bound to sqlite_engine
    ├── seeded_session_factory: same, with users (1, John Doe), (2, Jane Doe)
    ├── order_seeder: inserts raw order rows through session_factory
    ├── test_client: HTTPX AsyncClient against an in-memory app
    ├── relational_app: SQLite-backed app, tables created, users seeded
    └── relational_client: HTTPX AsyncClient against relational_app
"""

import os

# Tests must not pick up a developer's .env / shell backend selection.
os.environ["USE_POSTGRES"] = "false"
os.environ["DATABASE_URL"] = ""
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import insert

from layered_api.config import Settings
from layered_api.database import (
    create_engine,
    create_schema,
    create_session_factory,
    dispose_engine,
)
from layered_api.main import create_app
from layered_api.models.order import OrderRecord
from layered_api.models.user import UserRecord

SEED_USERS = [
    {"id": 1, "name": "John Doe"},
    {"id": 2, "name": "Jane Doe"},
]


async def seed_users(factory) -> None:
    async with factory() as session, session.begin():
        await session.execute(insert(UserRecord), SEED_USERS)


async def seed_orders(factory, rows) -> None:
    async with factory() as session, session.begin():
        await session.execute(insert(OrderRecord), rows)


@pytest.fixture
def memory_settings() -> Settings:
    return Settings(use_postgres="false", database_url="", log_level="WARNING")


@pytest.fixture
def sqlite_settings(tmp_path) -> Settings:
    """Relational backend for both entities, on a throwaway SQLite file."""
    db_path = tmp_path / "layered_api_test.db"
    return Settings(
        use_postgres="true",
        database_url=f"sqlite+aiosqlite:///{db_path}",
        log_level="WARNING",
    )


@pytest_asyncio.fixture
async def sqlite_engine(sqlite_settings):
    engine = create_engine(sqlite_settings)
    await create_schema(engine)
    yield engine
    await dispose_engine(engine)


@pytest.fixture
def session_factory(sqlite_engine):
    return create_session_factory(sqlite_engine)


@pytest_asyncio.fixture
async def seeded_session_factory(session_factory):
    await seed_users(session_factory)
    return session_factory


@pytest_asyncio.fixture
async def test_client(memory_settings):
    """
    Async HTTP client talking to a fresh in-memory app.

    ASGITransport does not run the lifespan; the in-memory app needs none.
    """
    app = create_app(memory_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def relational_app(sqlite_settings):
    """
    SQLite-backed app with tables created and users seeded.

    Done by hand here, since ASGITransport does not run the lifespan.
    """
    app = create_app(sqlite_settings)
    container = app.state.container
    await create_schema(container.engine)
    await seed_users(container.session_factory)
    yield app
    await dispose_engine(container.engine)


@pytest_asyncio.fixture
async def relational_client(relational_app):
    """Async HTTP client talking to the SQLite-backed app."""
    transport = ASGITransport(app=relational_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def order_seeder(session_factory):
    """Inserts raw order rows: await order_seeder([{"id": 1, "user_id": 1}])."""
    async def _seed(rows) -> None:
        await seed_orders(session_factory, rows)
    return _seed

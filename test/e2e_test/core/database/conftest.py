"""Test configuration for database e2e tests.

These tests run the repositories and the HTTP API against a real PostgreSQL
started with testcontainers. They are skipped unless ENABLE_POSTGRES_TESTS
is true.
"""

from __future__ import annotations

import os
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from testcontainers.postgres import PostgresContainer

from person_service.core.database import Base, create_all, create_engine, create_sessionmaker

ENABLE_POSTGRES_TESTS = os.getenv("ENABLE_POSTGRES_TESTS", "false").lower() in ("true", "1", "yes")
POSTGRES_IMAGE = os.getenv("POSTGRES_IMAGE", "postgres:16-alpine")


def pytest_collection_modifyitems(config, items):
    if ENABLE_POSTGRES_TESTS:
        return
    skip = pytest.mark.skip(reason="set ENABLE_POSTGRES_TESTS=true to run PostgreSQL tests")
    for item in items:
        if "e2e_test" in str(item.path):
            item.add_marker(skip)


@pytest.fixture(scope="session")
def postgres_url() -> Generator[str, None, None]:
    """Start PostgreSQL for the test session."""
    with PostgresContainer(POSTGRES_IMAGE, driver=None) as postgres:
        yield postgres.get_connection_url()


@pytest_asyncio.fixture
async def postgres_engine(postgres_url: str) -> AsyncGenerator[AsyncEngine, None]:
    """Create the schema before each test and drop it afterwards."""
    engine = create_engine(postgres_url)
    await create_all(engine)
    try:
        yield engine
    finally:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        await engine.dispose()


@pytest_asyncio.fixture
async def postgres_client(postgres_engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    from person_service.core.database import get_session
    from person_service.server.main import app

    session_factory = create_sessionmaker(postgres_engine)

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client
    app.dependency_overrides.clear()

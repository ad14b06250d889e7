from __future__ import annotations

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession


@pytest_asyncio.fixture(name="client")
async def client_fixture(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create an async HTTP client bound to the test database.

    ASGITransport does not run the lifespan, so the global engine is never
    touched.
    """
    from person_service.core.database import get_session
    from person_service.server.main import app

    async def get_session_override() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = get_session_override

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://localhost") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def create_person(client: AsyncClient):
    """Factory posting a person and returning the stored record."""

    async def _create(**fields) -> dict:
        payload = {"Name": "Jane Doe", "Skills": "go, python", "Email": "jane@example.com"}
        payload.update(fields)
        response = await client.post("/person", json=payload)
        assert response.status_code == 200, response.text
        return response.json()["Value"]

    return _create


@pytest_asyncio.fixture
async def create_address(client: AsyncClient):
    """Factory posting an address and returning the stored record."""

    async def _create(**fields) -> dict:
        payload = {"City": "Portland", "State": "OR"}
        payload.update(fields)
        response = await client.post("/address", json=payload)
        assert response.status_code == 200, response.text
        return response.json()

    return _create

"""Fixtures for API integration tests."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from bluevelvet.presentation.api.app import create_app
from bluevelvet.presentation.api.dependencies import get_db_session

CATEGORIES = "/api/categories"


@pytest.fixture
def app(session_maker):
    """App wired to the per-test SQLite database."""
    app = create_app()

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def create_category(client):
    """Create a category through the API and return its JSON."""

    async def _create(name: str, **fields) -> dict:
        response = await client.post(f"{CATEGORIES}/", json={"name": name, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _create

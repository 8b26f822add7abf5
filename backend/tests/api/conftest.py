"""API test fixtures — FastAPI test client over the in-memory database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - app.state.db_manager points at the test engine for the readiness probe
    - Lifespan does not run (ASGITransport), so nothing touches the configured DATABASE_URL
"""

import pytest
from httpx import ASGITransport, AsyncClient

from app.infrastructure.database import get_db, DatabaseSessionManager
from app.main import app


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = getattr(app.state, "db_manager", None)
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    app.state.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    app.state.db_manager = original_manager


async def _register(client: AsyncClient, name: str, email: str, password: str = "pass123") -> dict:
    res = await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert res.status_code == 200, res.text
    return res.json()


@pytest.fixture
def register_user(client):
    """Register through the API; returns the {user, token} body."""
    async def _do(name: str, email: str, password: str = "pass123") -> dict:
        return await _register(client, name, email, password)
    return _do


@pytest.fixture
async def alice_auth(client) -> dict:
    return await _register(client, "Alice", "a@x.com")


@pytest.fixture
async def bob_auth(client) -> dict:
    return await _register(client, "Bob", "b@x.com")

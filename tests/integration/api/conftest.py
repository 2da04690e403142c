"""
Fixtures for HTTP-level tests.

Each test gets its own file-based SQLite database and a fresh application.
The TestClient is used as a context manager so the lifespan (engine,
schema creation) runs exactly as in production.
"""

import asyncio

import pytest
from fastapi.testclient import TestClient

from userhub.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)
from userhub.infrastructure.persistence.sqlalchemy.seeder import (
    DEFAULT_PASSWORD,
    seed_users,
)
from userhub.presentation.api.app import create_app
from userhub_auth import PasswordHashingService

API = "/api/v1"

ADMIN_EMAIL = "admin@example.com"
USER_EMAIL = "user@example.com"


@pytest.fixture
def api_settings(make_settings, tmp_path):
    return make_settings(database_dsn=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}")


@pytest.fixture
def seeded(api_settings):
    """Seed the admin and regular user before the app starts."""

    async def _seed():
        engine = create_engine(api_settings)
        try:
            await create_tables(engine)
            async with create_session_maker(engine)() as session:
                await seed_users(
                    session,
                    PasswordHashingService(rounds=api_settings.bcrypt_rounds),
                )
        finally:
            await engine.dispose()

    asyncio.run(_seed())


@pytest.fixture
def app(api_settings):
    return create_app(api_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def login(client: TestClient, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = client.post(
        f"{API}/auth/login",
        json={"email": email, "password": password},
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def register(
    client: TestClient,
    email: str,
    name: str = "Test User",
    password: str = "secret123",
) -> dict:
    response = client.post(
        f"{API}/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def admin_headers(seeded, client):
    return bearer(login(client, ADMIN_EMAIL))


@pytest.fixture
def user_headers(seeded, client):
    return bearer(login(client, USER_EMAIL))

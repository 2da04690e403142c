"""Tests for the development seeder."""

import pytest

from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from userhub.infrastructure.persistence.sqlalchemy.seeder import (
    DEFAULT_PASSWORD,
    SEED_USERS,
    seed_users,
)
from userhub_auth import PasswordHashingService


class TestSeedUsers:
    def setup_method(self):
        self.password_service = PasswordHashingService(rounds=4)

    @pytest.mark.asyncio
    async def test_seeds_admin_and_regular_user(self, sqlite_session):
        created = await seed_users(sqlite_session, self.password_service)

        assert [u.email for u in created] == [s.email for s in SEED_USERS]

        repo = UserRepositorySQLAlchemy(sqlite_session)
        admin = await repo.find_by_email("admin@example.com")
        regular = await repo.find_by_email("user@example.com")
        assert admin.is_admin is True
        assert regular.role == "user"
        assert self.password_service.verify(DEFAULT_PASSWORD, admin.password_hash)

    @pytest.mark.asyncio
    async def test_second_run_skips_existing(self, sqlite_session):
        await seed_users(sqlite_session, self.password_service)

        created = await seed_users(sqlite_session, self.password_service)

        assert created == []
        repo = UserRepositorySQLAlchemy(sqlite_session)
        assert await repo.count() == len(SEED_USERS)

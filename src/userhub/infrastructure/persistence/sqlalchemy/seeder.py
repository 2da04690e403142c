"""Development data seeder.

Creates a fixed admin and a fixed regular user. Emails that already exist
are skipped, so running the seeder twice is harmless.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.user import User, UserRole
from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from userhub_auth import PasswordHashingService

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD = "password123"


@dataclass(frozen=True)
class SeedUser:
    name: str
    email: str
    role: UserRole


SEED_USERS: tuple[SeedUser, ...] = (
    SeedUser(name="Admin User", email="admin@example.com", role=UserRole.ADMIN),
    SeedUser(name="Regular User", email="user@example.com", role=UserRole.USER),
)


async def seed_users(
    session: AsyncSession,
    password_service: PasswordHashingService,
    users: tuple[SeedUser, ...] = SEED_USERS,
    password: str = DEFAULT_PASSWORD,
) -> list[User]:
    """Insert the seed users that do not exist yet and commit.

    Returns
    -------
    The users that were created by this run
    """
    repo = UserRepositorySQLAlchemy(session)
    created: list[User] = []

    for seed in users:
        if await repo.find_by_email(seed.email) is not None:
            logger.info("Seed user already exists, skipping: %s", seed.email)
            continue

        user = User.create(
            name=seed.name,
            email=seed.email,
            password_hash=password_service.hash(password),
            role=seed.role,
        )
        created.append(await repo.create(user))
        logger.info("Seeded user: %s (role: %s)", seed.email, seed.role.value)

    await session.commit()
    return created

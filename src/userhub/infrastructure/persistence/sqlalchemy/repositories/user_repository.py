"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.domain.shared.time import ensure_tz_aware
from userhub.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
    UserRepository,
)
from userhub.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# Upper bound of the INTEGER primary key
MAX_USER_ID = 2**31 - 1


def _is_unique_violation(error: IntegrityError) -> bool:
    text = str(error).lower()
    return "unique" in text or "duplicate key" in text


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    The repository only flushes; committing is left to the caller that owns
    the session.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, user: User) -> User:
        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        user.assign_id(model.id)
        logger.info("Created user: %s (email: %s)", model.id, model.email)
        return self._map_to_domain(model)

    async def find_by_id(self, user_id: int) -> User | None:
        model = await self._find_live_model(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(
            UserModel.email == email,
            UserModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def update(self, user: User) -> User:
        if user.id is None or user.is_deleted:
            raise UserNotFoundError(user.id)

        model = await self._find_live_model(user.id)
        if model is None:
            raise UserNotFoundError(user.id)

        self._update_model(model, user)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email, "email already taken") from e
            raise

        logger.debug("Updated user: %s", user.id)
        return self._map_to_domain(model)

    async def delete(self, user_id: int) -> None:
        model = await self._find_live_model(user_id)
        if model is None:
            raise UserNotFoundError(user_id)

        user = self._map_to_domain(model)
        user.mark_deleted()
        self._update_model(model, user)
        await self._session.flush()
        logger.info("Soft-deleted user: %s", user_id)

    async def count(self) -> int:
        stmt = (
            select(func.count())
            .select_from(UserModel)
            .where(UserModel.deleted_at.is_(None))
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_live_model(self, user_id: int) -> UserModel | None:
        if not 0 < user_id <= MAX_USER_ID:
            # Outside the key range, so no row can match
            return None

        stmt = select(UserModel).where(
            UserModel.id == user_id,
            UserModel.deleted_at.is_(None),
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            role=model.role,
            is_active=model.is_active,
            # SQLite returns naive datetimes
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
            deleted_at=(
                ensure_tz_aware(model.deleted_at) if model.deleted_at else None
            ),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            role=user.role,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
            deleted_at=user.deleted_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.role = user.role
        model.is_active = user.is_active
        model.updated_at = user.updated_at
        model.deleted_at = user.deleted_at

    # Kept last: the method name shadows the builtin inside the class body.
    async def list(self, offset: int, limit: int) -> tuple[list[User], int]:
        stmt = (
            select(UserModel)
            .where(UserModel.deleted_at.is_(None))
            .order_by(UserModel.id)
            .offset(offset)
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        users = [self._map_to_domain(model) for model in result.scalars().all()]
        total = await self.count()
        return users, total

"""Command to update a user's profile and credentials."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Optional

from userhub.application.dtos import UserView
from userhub.domain.user import EmailAlreadyExistsError, UserNotFoundError

if TYPE_CHECKING:
    from userhub.domain.user import UserRepository
    from userhub_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class UpdateUserCommand:
    """Apply a partial update to a user.

    Each of name, email and password is optional; ``None`` or an empty
    string leaves the field unchanged.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def execute(
        self,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
    ) -> UserView:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if name:
            user.rename(name)

        if email and email != user.email:
            owner = await self._user_repo.find_by_email(email)
            if owner is not None and owner.id != user.id:
                raise EmailAlreadyExistsError(email, "email already taken")
            user.change_email(email)

        if password:
            password_hash = await asyncio.to_thread(
                self._password_service.hash,
                password,
            )
            user.change_password_hash(password_hash)

        user = await self._user_repo.update(user)
        logger.info("User updated: %s", user_id)
        return UserView.from_user(user)

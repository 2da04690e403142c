"""Authentication service for user registration and login."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from userhub.application.dtos import LoginResult, UserView
from userhub.domain.user import (
    AccountInactiveError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    User,
    UserRole,
)

if TYPE_CHECKING:
    from userhub.domain.user import UserRepository
    from userhub_auth import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates userhub_auth infrastructure (password hashing, JWT tokens)
    with the User domain to provide:
    - User registration
    - Login with password

    bcrypt work runs in a worker thread so the event loop stays free while
    a hash is computed.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(self, name: str, email: str, password: str) -> UserView:
        """Create a new active user with the ``user`` role.

        Raises
        ------
        EmailAlreadyExistsError
            If a live user already owns the email
        WeakPasswordError
            If the password does not meet strength requirements
        """
        existing_user = await self._user_repo.find_by_email(email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(email)

        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = User.create(name, email, password_hash, role=UserRole.USER)
        user = await self._user_repo.create(user)

        logger.info("User registered: %s (id: %s)", email, user.id)
        return UserView.from_user(user)

    async def login(self, email: str, password: str) -> LoginResult:
        """Verify credentials and issue an access token.

        Raises
        ------
        InvalidCredentialsError
            For an unknown email or a wrong password
        AccountInactiveError
            If the password is correct but the account is deactivated
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            raise InvalidCredentialsError

        password_ok = await asyncio.to_thread(
            self._password_service.verify,
            password,
            user.password_hash,
        )
        if not password_ok:
            logger.debug("Failed login attempt for %s", email)
            raise InvalidCredentialsError

        if not user.is_active:
            raise AccountInactiveError

        token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            role=user.role,
        )

        logger.info("User logged in: %s", email)
        return LoginResult(token=token, user=UserView.from_user(user))

"""Unit tests for AuthenticationService."""

from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest

from userhub.application.services import AuthenticationService
from userhub.domain.user import (
    AccountInactiveError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    User,
)
from userhub_auth import JWTService, PasswordHashingService, WeakPasswordError

TEST_NAME = "Jane Doe"
TEST_EMAIL = "jane@example.com"
TEST_PASSWORD = "secure_password_123"
TEST_HASH = "hashed_password"


def _stored_user(is_active: bool = True) -> User:
    now = datetime.now(tz=timezone.utc)
    return User.reconstitute(
        id=1,
        name=TEST_NAME,
        email=TEST_EMAIL,
        password_hash=TEST_HASH,
        role="user",
        is_active=is_active,
        created_at=now,
        updated_at=now,
    )


async def _assign_id(user: User) -> User:
    user.assign_id(1)
    return user


class TestRegister:
    """Tests for user registration."""

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.password_service.hash.return_value = TEST_HASH
        self.jwt_service = Mock(spec=JWTService)

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_register_creates_active_user(self):
        self.user_repo.find_by_email.return_value = None
        self.user_repo.create.side_effect = _assign_id

        view = await self.service.register(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        assert view.id == 1
        assert view.name == TEST_NAME
        assert view.email == TEST_EMAIL
        assert view.role == "user"
        assert view.is_active is True
        self.password_service.hash.assert_called_once_with(TEST_PASSWORD)

        created = self.user_repo.create.call_args.args[0]
        assert created.password_hash == TEST_HASH

    @pytest.mark.asyncio
    async def test_register_does_not_issue_token(self):
        self.user_repo.find_by_email.return_value = None
        self.user_repo.create.side_effect = _assign_id

        await self.service.register(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        self.jwt_service.create_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self):
        self.user_repo.find_by_email.return_value = _stored_user()

        with pytest.raises(EmailAlreadyExistsError) as exc_info:
            await self.service.register(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)

        assert exc_info.value.message == "email already registered"
        self.password_service.hash.assert_not_called()
        self.user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_weak_password_propagates(self):
        self.user_repo.find_by_email.return_value = None
        self.password_service.hash.side_effect = WeakPasswordError("too short")

        with pytest.raises(WeakPasswordError):
            await self.service.register(TEST_NAME, TEST_EMAIL, "123")

        self.user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_lost_race_surfaces_conflict(self):
        self.user_repo.find_by_email.return_value = None
        self.user_repo.create.side_effect = EmailAlreadyExistsError(TEST_EMAIL)

        with pytest.raises(EmailAlreadyExistsError):
            await self.service.register(TEST_NAME, TEST_EMAIL, TEST_PASSWORD)


class TestLogin:
    """Tests for login."""

    def setup_method(self):
        self.user_repo = AsyncMock()
        self.password_service = Mock(spec=PasswordHashingService)
        self.jwt_service = Mock(spec=JWTService)
        self.jwt_service.create_access_token.return_value = "jwt-token"

        self.service = AuthenticationService(
            user_repository=self.user_repo,
            password_service=self.password_service,
            jwt_service=self.jwt_service,
        )

    @pytest.mark.asyncio
    async def test_login_success(self):
        self.user_repo.find_by_email.return_value = _stored_user()
        self.password_service.verify.return_value = True

        result = await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        assert result.token == "jwt-token"
        assert result.user.id == 1
        assert result.user.email == TEST_EMAIL
        self.password_service.verify.assert_called_once_with(TEST_PASSWORD, TEST_HASH)
        self.jwt_service.create_access_token.assert_called_once_with(
            user_id=1,
            email=TEST_EMAIL,
            role="user",
        )

    @pytest.mark.asyncio
    async def test_login_unknown_email(self):
        self.user_repo.find_by_email.return_value = None

        with pytest.raises(InvalidCredentialsError) as exc_info:
            await self.service.login("nobody@example.com", TEST_PASSWORD)

        assert exc_info.value.message == "invalid email or password"
        self.password_service.verify.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_wrong_password(self):
        self.user_repo.find_by_email.return_value = _stored_user()
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "wrong")

        self.jwt_service.create_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_inactive_account(self):
        self.user_repo.find_by_email.return_value = _stored_user(is_active=False)
        self.password_service.verify.return_value = True

        with pytest.raises(AccountInactiveError) as exc_info:
            await self.service.login(TEST_EMAIL, TEST_PASSWORD)

        assert exc_info.value.message == "account is not active"
        self.jwt_service.create_access_token.assert_not_called()

    @pytest.mark.asyncio
    async def test_login_inactive_with_wrong_password_reports_credentials(self):
        self.user_repo.find_by_email.return_value = _stored_user(is_active=False)
        self.password_service.verify.return_value = False

        with pytest.raises(InvalidCredentialsError):
            await self.service.login(TEST_EMAIL, "wrong")

"""FastAPI dependency injection for the userhub API.

Provides dependencies for:
- Settings and shared services (read from ``app.state``)
- Database sessions
- Authentication (user context from JWT)
- Role gating
- Application services, commands and queries
"""

import logging
from typing import Annotated, AsyncGenerator, Awaitable, Callable

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from userhub.application.commands.user import (
    DeleteUserCommand,
    SetUserActiveCommand,
    UpdateUserCommand,
    UpdateUserRoleCommand,
)
from userhub.application.context import UserContext
from userhub.application.queries.user import GetUserQuery, ListUsersQuery
from userhub.application.services import AuthenticationService
from userhub.domain.user import UserRepository, UserRole
from userhub.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from userhub_auth import InvalidTokenError, JWTService, PasswordHashingService
from userhub_config.settings import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Application State
# -----------------------------------------------------------------------------


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
JWTServiceDep = Annotated[JWTService, Depends(get_jwt_service)]
PasswordServiceDep = Annotated[PasswordHashingService, Depends(get_password_service)]


# -----------------------------------------------------------------------------
# Database Session
# -----------------------------------------------------------------------------


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Creates an async session for the request using the shared engine/pool.
    Routers commit explicitly; a session closed without commit rolls back.

    Yields
    ------
    AsyncSession for database operations
    """
    async with request.app.state.session_maker() as session:
        yield session


# Type alias for injected session
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepositorySQLAlchemy(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


async def get_user_context(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
    jwt_service: JWTServiceDep,
) -> UserContext:
    """
    Resolve the caller from the ``Authorization: Bearer`` header.

    The token alone identifies the caller; the database is not consulted.

    Raises
    ------
    HTTPException
        401 if the header is missing or the token is invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header is required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        ) from e

    return UserContext.from_token(payload)


# Type alias for injected user context
CurrentUserContext = Annotated[UserContext, Depends(get_user_context)]


def require_role(role: str) -> Callable[[UserContext], Awaitable[UserContext]]:
    """Build a dependency that admits only callers with ``role``."""

    async def _require_role(user: CurrentUserContext) -> UserContext:
        if not user.has_role(role):
            logger.warning(
                "User %s (role=%s) denied access requiring role %s",
                user.user_id,
                user.role,
                role,
            )
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Insufficient permissions",
            )
        return user

    return _require_role


# Type alias for admin-only routes
AdminContext = Annotated[UserContext, Depends(require_role(UserRole.ADMIN.value))]


# -----------------------------------------------------------------------------
# Application Services, Commands & Queries
# -----------------------------------------------------------------------------


def get_authentication_service(
    user_repo: UserRepo,
    password_service: PasswordServiceDep,
    jwt_service: JWTServiceDep,
) -> AuthenticationService:
    return AuthenticationService(
        user_repository=user_repo,
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


def get_update_user_command(
    user_repo: UserRepo,
    password_service: PasswordServiceDep,
) -> UpdateUserCommand:
    return UpdateUserCommand(user_repo, password_service)


def get_delete_user_command(user_repo: UserRepo) -> DeleteUserCommand:
    return DeleteUserCommand(user_repo)


def get_set_user_active_command(user_repo: UserRepo) -> SetUserActiveCommand:
    return SetUserActiveCommand(user_repo)


def get_update_user_role_command(user_repo: UserRepo) -> UpdateUserRoleCommand:
    return UpdateUserRoleCommand(user_repo)


def get_user_query(user_repo: UserRepo) -> GetUserQuery:
    return GetUserQuery(user_repo)


def get_list_users_query(user_repo: UserRepo) -> ListUsersQuery:
    return ListUsersQuery(user_repo)

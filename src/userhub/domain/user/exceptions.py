"""User domain exceptions.

Each exception extends the shared taxonomy so the presentation layer can map
it to a status code without knowing about the user domain.
"""

from userhub.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    UnauthorizedError,
)


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str, message: str = "email already registered"):
        self.email = email
        super().__init__(
            message,
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class UserNotFoundError(EntityNotFoundError):
    """User not found."""

    def __init__(self, user_id: int | None = None) -> None:
        self.user_id = user_id
        super().__init__(
            "user not found",
            code=ErrorCode.USER_NOT_FOUND,
            details={"user_id": user_id},
        )


class InvalidCredentialsError(UnauthorizedError):
    """Unknown email or wrong password.

    Both cases share one message so the response does not reveal which
    emails are registered.
    """

    def __init__(self) -> None:
        super().__init__(
            "invalid email or password",
            code=ErrorCode.INVALID_CREDENTIALS,
        )


class AccountInactiveError(ForbiddenError):
    """Correct credentials, but the account has been deactivated."""

    def __init__(self) -> None:
        super().__init__(
            "account is not active",
            code=ErrorCode.ACCOUNT_INACTIVE,
        )

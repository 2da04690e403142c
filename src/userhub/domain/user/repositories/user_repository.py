"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from userhub.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates.

    Every read ignores soft-deleted users.
    """

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user and return it with its assigned id.

        Raises EmailAlreadyExistsError if the email is taken.
        """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def list(self, offset: int, limit: int) -> tuple[list[User], int]:
        """Return one page of users ordered by id, plus the total count."""

    @abstractmethod
    async def update(self, user: User) -> User:
        """Persist the mutable fields of an existing user.

        Raises UserNotFoundError if the user is missing or deleted, and
        EmailAlreadyExistsError if the new email is taken.
        """

    @abstractmethod
    async def delete(self, user_id: int) -> None:
        """Soft-delete a user by ID.

        Raises UserNotFoundError if no live user matches.
        """

    @abstractmethod
    async def count(self) -> int:
        """Count users that are not deleted."""

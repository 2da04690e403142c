"""User aggregate."""

from datetime import datetime
from typing import Union

from userhub.domain.shared.time import utc_now
from userhub.domain.user.value_objects import UserRole


class User:
    """
    User aggregate root.

    The numeric id is assigned by the store on insert, so a freshly created
    user has ``id is None`` until it has been persisted.
    """

    def __init__(  # NOQA: PLR0913
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Union[str, UserRole] = UserRole.USER,
        is_active: bool = True,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        deleted_at: datetime | None = None,
    ):
        self._id = id
        self._name = name
        self._email = email
        self._password_hash = password_hash
        self._role = role.value if isinstance(role, UserRole) else role
        self._is_active = is_active
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at
        self._deleted_at = deleted_at

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def role(self) -> str:
        return self._role

    @property
    def is_active(self) -> bool:
        return self._is_active

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN.value

    @property
    def is_deleted(self) -> bool:
        return self._deleted_at is not None

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def deleted_at(self) -> datetime | None:
        return self._deleted_at

    def rename(self, name: str) -> None:
        self._name = name
        self._touch()

    def change_email(self, email: str) -> None:
        self._email = email
        self._touch()

    def change_password_hash(self, password_hash: str) -> None:
        self._password_hash = password_hash
        self._touch()

    def activate(self) -> None:
        self._is_active = True
        self._touch()

    def deactivate(self) -> None:
        self._is_active = False
        self._touch()

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._role = UserRole(role).value
        self._touch()

    def mark_deleted(self) -> None:
        """Soft-delete the user. Deleted users are terminal."""
        now = utc_now()
        self._deleted_at = now
        self._updated_at = now

    def assign_id(self, user_id: int) -> None:
        """Set the store-generated id after the first insert."""
        if self._id is not None and self._id != user_id:
            msg = f"User already has id {self._id}"
            raise ValueError(msg)
        self._id = user_id

    def _touch(self) -> None:
        self._updated_at = utc_now()

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password_hash: str,
        role: Union[str, UserRole] = UserRole.USER,
    ) -> "User":
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            is_active=True,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: int,
        name: str,
        email: str,
        password_hash: str,
        role: str,
        is_active: bool,
        created_at: datetime,
        updated_at: datetime,
        deleted_at: datetime | None = None,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            role=role,
            is_active=is_active,
            created_at=created_at,
            updated_at=updated_at,
            deleted_at=deleted_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email}, role={self._role})"

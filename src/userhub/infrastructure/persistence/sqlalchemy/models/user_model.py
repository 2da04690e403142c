"""SQLAlchemy model for User aggregate."""

from sqlalchemy import Boolean, Index, Integer, String, text
from sqlalchemy.orm import Mapped, mapped_column

from userhub.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    SoftDeleteMixin,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin, SoftDeleteMixin):
    """SQLAlchemy model for persisting User aggregates.

    Email uniqueness is enforced by a partial index over live rows only, so
    a soft-deleted user's email can be registered again.
    """

    __tablename__ = "users"
    __table_args__ = (
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(20), default="user", nullable=False)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email}, role={self.role})>"

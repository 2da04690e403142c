"""User resource schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from userhub.application.dtos import UserView


class UserResponse(BaseModel):
    """Public user representation. The password hash is never exposed."""

    id: int
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: UserView) -> "UserResponse":
        return cls(
            id=view.id,
            name=view.name,
            email=view.email,
            role=view.role,
            is_active=view.is_active,
            created_at=view.created_at,
            updated_at=view.updated_at,
        )


class UpdateUserRequest(BaseModel):
    """Partial update. Omitted or empty fields are left unchanged."""

    name: Optional[str] = Field(None, min_length=2, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Jane Doe", "email": "jane@example.com"},
        },
    )

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def _empty_as_missing(cls, v: Any) -> Any:
        if v == "":
            return None
        return v

"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from userhub.presentation.api.schemas.users import UserResponse


class RegisterRequest(BaseModel):
    """Request schema for user registration."""

    name: str = Field(
        ...,
        min_length=2,
        max_length=100,
        description="Display name (2-100 characters)",
    )
    email: EmailStr = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=6,
        description="Password (at least 6 characters)",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Jane Doe",
                "email": "user@example.com",
                "password": "password123",
            },
        },
    )


class LoginRequest(BaseModel):
    """Request schema for user login."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "password123",
            },
        },
    )


class LoginResponse(BaseModel):
    token: str = Field(..., description="Bearer access token")
    user: UserResponse

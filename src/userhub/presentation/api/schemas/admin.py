"""Admin schemas."""

from pydantic import BaseModel, Field

from userhub.domain.user import UserRole


class UpdateStatusRequest(BaseModel):
    is_active: bool = Field(..., description="Whether the account may log in")


class UpdateRoleRequest(BaseModel):
    role: UserRole = Field(..., description="New role: 'user' or 'admin'")

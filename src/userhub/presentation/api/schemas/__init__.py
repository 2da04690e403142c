from userhub.presentation.api.schemas.admin import (
    UpdateRoleRequest,
    UpdateStatusRequest,
)
from userhub.presentation.api.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from userhub.presentation.api.schemas.common import (
    ApiResponse,
    HealthStatus,
    PaginationMetaResponse,
    ReadinessStatus,
    error_body,
)
from userhub.presentation.api.schemas.users import UpdateUserRequest, UserResponse

__all__ = [
    "ApiResponse",
    "HealthStatus",
    "LoginRequest",
    "LoginResponse",
    "PaginationMetaResponse",
    "ReadinessStatus",
    "RegisterRequest",
    "UpdateRoleRequest",
    "UpdateStatusRequest",
    "UpdateUserRequest",
    "UserResponse",
    "error_body",
]

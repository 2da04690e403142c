from userhub.application.dtos.pagination import (
    PagedResult,
    PageRequest,
    PaginationMeta,
)
from userhub.application.dtos.user_dto import LoginResult, UserView

__all__ = [
    "LoginResult",
    "PageRequest",
    "PagedResult",
    "PaginationMeta",
    "UserView",
]

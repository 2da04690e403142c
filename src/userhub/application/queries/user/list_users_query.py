"""Query to list users one page at a time."""

from typing import Optional

from userhub.application.dtos import (
    PagedResult,
    PageRequest,
    PaginationMeta,
    UserView,
)
from userhub.domain.user import UserRepository


class ListUsersQuery:
    """List live users ordered by id.

    Raw page/limit values are normalized: page < 1 becomes 1, limit < 1
    becomes 10, limit > 100 is clamped to 100 and page is capped at
    ``MAX_PAGE``.
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> PagedResult[UserView]:
        request = PageRequest.of(page, limit)
        users, total = await self._user_repo.list(request.offset, request.limit)
        return PagedResult(
            items=[UserView.from_user(u) for u in users],
            meta=PaginationMeta.build(request, total),
        )

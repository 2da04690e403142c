"""Query to get a single user by id."""

from userhub.application.dtos import UserView
from userhub.domain.user import UserNotFoundError, UserRepository


class GetUserQuery:
    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: int) -> UserView:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return UserView.from_user(user)

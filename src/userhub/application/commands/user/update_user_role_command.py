import logging

from userhub.application.dtos import UserView
from userhub.domain.user import UserNotFoundError, UserRepository, UserRole

logger = logging.getLogger(__name__)


class UpdateUserRoleCommand:
    """Command to update a user's role."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: int, new_role: UserRole) -> UserView:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        user.change_role(new_role)

        user = await self._user_repo.update(user)
        logger.info("User %s role changed to %s", user_id, user.role)
        return UserView.from_user(user)

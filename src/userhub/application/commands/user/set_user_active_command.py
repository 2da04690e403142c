import logging

from userhub.application.dtos import UserView
from userhub.domain.user import UserNotFoundError, UserRepository

logger = logging.getLogger(__name__)


class SetUserActiveCommand:
    """Command to activate or deactivate a user account."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    async def execute(self, user_id: int, is_active: bool) -> UserView:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)

        if is_active:
            user.activate()
        else:
            user.deactivate()

        user = await self._user_repo.update(user)
        logger.info("User %s active=%s", user_id, is_active)
        return UserView.from_user(user)

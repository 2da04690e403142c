from userhub.application.commands.user.delete_user_command import DeleteUserCommand
from userhub.application.commands.user.set_user_active_command import (
    SetUserActiveCommand,
)
from userhub.application.commands.user.update_user_command import UpdateUserCommand
from userhub.application.commands.user.update_user_role_command import (
    UpdateUserRoleCommand,
)

__all__ = [
    "DeleteUserCommand",
    "SetUserActiveCommand",
    "UpdateUserCommand",
    "UpdateUserRoleCommand",
]

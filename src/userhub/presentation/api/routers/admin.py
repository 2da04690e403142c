"""Admin router. Every route requires the ``admin`` role."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from userhub.application.commands.user import (
    SetUserActiveCommand,
    UpdateUserRoleCommand,
)
from userhub.application.queries.user import ListUsersQuery
from userhub.presentation.api.dependencies import (
    AdminContext,
    DBSession,
    get_list_users_query,
    get_set_user_active_command,
    get_update_user_role_command,
)
from userhub.presentation.api.schemas import (
    ApiResponse,
    PaginationMetaResponse,
    UpdateRoleRequest,
    UpdateStatusRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")

UserId = Annotated[int, Path(gt=0, description="User ID")]


@router.get(
    "/users",
    response_model_exclude_none=True,
    summary="List all users",
    responses={
        200: {"description": "Users retrieved successfully"},
        403: {"description": "Admin access required"},
    },
)
async def list_users(
    _admin: AdminContext,  # Used for authorization check
    query: Annotated[ListUsersQuery, Depends(get_list_users_query)],
    page: Annotated[int, Query()] = 1,
    limit: Annotated[int, Query()] = 10,
) -> ApiResponse[list[UserResponse]]:
    result = await query.execute(page=page, limit=limit)
    return ApiResponse[list[UserResponse]].ok(
        "Users retrieved successfully",
        data=[UserResponse.from_view(u) for u in result.items],
        meta=PaginationMetaResponse.from_meta(result.meta),
    )


@router.patch(
    "/users/{user_id}/status",
    response_model_exclude_none=True,
    summary="Activate or deactivate a user",
    responses={
        200: {"description": "User updated successfully"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
    },
)
async def set_user_status(
    user_id: UserId,
    request: UpdateStatusRequest,
    admin: AdminContext,
    command: Annotated[SetUserActiveCommand, Depends(get_set_user_active_command)],
    session: DBSession,
) -> ApiResponse[UserResponse]:
    """Deactivated users cannot log in. Tokens already issued stay valid."""
    user = await command.execute(user_id, is_active=request.is_active)
    await session.commit()

    logger.info(
        "Admin %s set user %s active=%s",
        admin.email,
        user_id,
        request.is_active,
    )
    return ApiResponse[UserResponse].ok(
        "User updated successfully",
        data=UserResponse.from_view(user),
    )


@router.patch(
    "/users/{user_id}/role",
    response_model_exclude_none=True,
    summary="Change a user's role",
    responses={
        200: {"description": "User updated successfully"},
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
        422: {"description": "Invalid role"},
    },
)
async def set_user_role(
    user_id: UserId,
    request: UpdateRoleRequest,
    admin: AdminContext,
    command: Annotated[
        UpdateUserRoleCommand,
        Depends(get_update_user_role_command),
    ],
    session: DBSession,
) -> ApiResponse[UserResponse]:
    user = await command.execute(user_id, new_role=request.role)
    await session.commit()

    logger.info("Admin %s set user %s role=%s", admin.email, user_id, user.role)
    return ApiResponse[UserResponse].ok(
        "User updated successfully",
        data=UserResponse.from_view(user),
    )

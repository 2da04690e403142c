"""User resource router. All routes require a bearer token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query

from userhub.application.commands.user import DeleteUserCommand, UpdateUserCommand
from userhub.application.queries.user import GetUserQuery, ListUsersQuery
from userhub.presentation.api.dependencies import (
    CurrentUserContext,
    DBSession,
    get_delete_user_command,
    get_list_users_query,
    get_update_user_command,
    get_user_query,
)
from userhub.presentation.api.schemas import (
    ApiResponse,
    PaginationMetaResponse,
    UpdateUserRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

UserId = Annotated[int, Path(gt=0, description="User ID")]
GetUserQueryDep = Annotated[GetUserQuery, Depends(get_user_query)]
ListUsersQueryDep = Annotated[ListUsersQuery, Depends(get_list_users_query)]
UpdateUserCommandDep = Annotated[UpdateUserCommand, Depends(get_update_user_command)]
DeleteUserCommandDep = Annotated[DeleteUserCommand, Depends(get_delete_user_command)]


@router.get(
    "/me",
    response_model_exclude_none=True,
    summary="Get the current user",
    responses={
        200: {"description": "User retrieved successfully"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def get_me(
    current_user: CurrentUserContext,
    query: GetUserQueryDep,
) -> ApiResponse[UserResponse]:
    user = await query.execute(current_user.user_id)
    return ApiResponse[UserResponse].ok(
        "User retrieved successfully",
        data=UserResponse.from_view(user),
    )


@router.get(
    "",
    response_model_exclude_none=True,
    summary="List users",
    responses={
        200: {"description": "Users retrieved successfully"},
        401: {"description": "Not authenticated"},
    },
)
async def list_users(
    _current_user: CurrentUserContext,  # Used for authentication
    query: ListUsersQueryDep,
    page: Annotated[int, Query(description="Page number (1-based)")] = 1,
    limit: Annotated[int, Query(description="Items per page (max 100)")] = 10,
) -> ApiResponse[list[UserResponse]]:
    """
    List users ordered by id.

    Out-of-range values are normalized rather than rejected: ``page < 1``
    becomes 1, ``limit < 1`` becomes 10 and ``limit > 100`` becomes 100.
    Very large pages are capped and come back empty.
    """
    result = await query.execute(page=page, limit=limit)
    return ApiResponse[list[UserResponse]].ok(
        "Users retrieved successfully",
        data=[UserResponse.from_view(u) for u in result.items],
        meta=PaginationMetaResponse.from_meta(result.meta),
    )


@router.get(
    "/{user_id}",
    response_model_exclude_none=True,
    summary="Get a user by ID",
    responses={
        200: {"description": "User retrieved successfully"},
        400: {"description": "Invalid user ID"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def get_user(
    user_id: UserId,
    _current_user: CurrentUserContext,
    query: GetUserQueryDep,
) -> ApiResponse[UserResponse]:
    user = await query.execute(user_id)
    return ApiResponse[UserResponse].ok(
        "User retrieved successfully",
        data=UserResponse.from_view(user),
    )


@router.put(
    "/{user_id}",
    response_model_exclude_none=True,
    summary="Update a user",
    responses={
        200: {"description": "User updated successfully"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
        409: {"description": "Email already taken"},
        422: {"description": "Validation failed"},
    },
)
async def update_user(
    user_id: UserId,
    request: UpdateUserRequest,
    current_user: CurrentUserContext,
    command: UpdateUserCommandDep,
    session: DBSession,
) -> ApiResponse[UserResponse]:
    """Update any of name, email and password. Omitted fields are kept."""
    user = await command.execute(
        user_id,
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    logger.info("User %s updated by %s", user_id, current_user.user_id)
    return ApiResponse[UserResponse].ok(
        "User updated successfully",
        data=UserResponse.from_view(user),
    )


@router.delete(
    "/{user_id}",
    response_model_exclude_none=True,
    summary="Delete a user",
    responses={
        200: {"description": "User deleted successfully"},
        401: {"description": "Not authenticated"},
        404: {"description": "User not found"},
    },
)
async def delete_user(
    user_id: UserId,
    current_user: CurrentUserContext,
    command: DeleteUserCommandDep,
    session: DBSession,
) -> ApiResponse[None]:
    """Soft-delete a user. The row is kept with ``deleted_at`` set."""
    await command.execute(user_id)
    await session.commit()

    logger.info("User %s deleted by %s", user_id, current_user.user_id)
    return ApiResponse[None].ok("User deleted successfully")

"""Authentication router for user registration and login."""

import logging

from fastapi import APIRouter, status

from userhub.presentation.api.dependencies import AuthService, DBSession
from userhub.presentation.api.schemas import (
    ApiResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model_exclude_none=True,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        409: {"description": "Email already registered"},
        422: {"description": "Validation failed"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
) -> ApiResponse[UserResponse]:
    """
    Create a new account with the ``user`` role.

    No token is returned; call ``/auth/login`` afterwards.
    """
    user = await auth_service.register(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return ApiResponse[UserResponse].ok(
        "User registered successfully",
        data=UserResponse.from_view(user),
    )


@router.post(
    "/login",
    response_model_exclude_none=True,
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        401: {"description": "Invalid email or password"},
        403: {"description": "Account is not active"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
) -> ApiResponse[LoginResponse]:
    """
    Authenticate with email and password.

    Returns a bearer access token together with the user profile.
    """
    result = await auth_service.login(
        email=request.email,
        password=request.password,
    )

    return ApiResponse[LoginResponse].ok(
        "Login successful",
        data=LoginResponse(
            token=result.token,
            user=UserResponse.from_view(result.user),
        ),
    )

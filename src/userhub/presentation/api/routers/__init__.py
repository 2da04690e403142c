from userhub.presentation.api.routers.admin import router as admin_router
from userhub.presentation.api.routers.auth import router as auth_router
from userhub.presentation.api.routers.health import router as health_router
from userhub.presentation.api.routers.users import router as users_router

__all__ = [
    "admin_router",
    "auth_router",
    "health_router",
    "users_router",
]

"""
API routers for endpoint organization.
"""
from .health import router as health_router
from .users import router as users_router
from .workspaces import router as workspaces_router
from .tests import router as tests_router
from .invitations import router as invitations_router
from .colors import router as colors_router

__all__ = [
    "health_router",
    "users_router",
    "workspaces_router",
    "tests_router",
    "invitations_router",
    "colors_router",
]

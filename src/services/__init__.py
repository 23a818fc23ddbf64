"""
Service layer for business logic.
"""
from .base import EntityService
from .user_service import UserService
from .workspace_service import WorkspaceService
from .tests_service import TestsService
from .invitation_service import InvitationService
from .color_service import ColorService

__all__ = [
    "EntityService",
    "UserService",
    "WorkspaceService",
    "TestsService",
    "InvitationService",
    "ColorService",
]

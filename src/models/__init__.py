"""
Matrix Backend API Models.

This module re-exports all model classes for convenient importing.
"""

from .user import UserResponse
from .workspace import WorkspaceResponse
from .tests import TestResponse
from .invitation import InvitationResponse
from .color import ColorResponse

__all__ = [
    "UserResponse",
    "WorkspaceResponse",
    "TestResponse",
    "InvitationResponse",
    "ColorResponse",
]

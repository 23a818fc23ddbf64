"""
Repository layer for data access.
"""
from .result import FailureKind, RepositoryResult
from .base import BaseRepository
from .user_repo import UserRepository
from .workspace_repo import WorkspaceRepository
from .tests_repo import TestsRepository
from .invitation_repo import InvitationRepository
from .color_repo import ColorRepository

__all__ = [
    "FailureKind",
    "RepositoryResult",
    "BaseRepository",
    "UserRepository",
    "WorkspaceRepository",
    "TestsRepository",
    "InvitationRepository",
    "ColorRepository",
]

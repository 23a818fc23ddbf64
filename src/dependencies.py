"""
FastAPI dependency injection factories.

This module provides dependency factories for repositories, services,
and other shared resources used across routers.
"""
import logging
from typing import Any, Dict, Optional

import asyncpg
from fastapi import Depends, Request

from src.auth.token_handler import TokenHandler
from src.database import get_db_pool
from src.repositories import (
    UserRepository,
    WorkspaceRepository,
    TestsRepository,
    InvitationRepository,
    ColorRepository,
)
from src.services import (
    UserService,
    WorkspaceService,
    TestsService,
    InvitationService,
    ColorService,
)

logger = logging.getLogger(__name__)


# Global token handler instance (set during app startup)
_token_handler: Optional[TokenHandler] = None


def set_token_handler(handler: Optional[TokenHandler]):
    """Set the global token handler instance."""
    global _token_handler
    _token_handler = handler


def get_token_handler() -> TokenHandler:
    """Get the global token handler instance."""
    if _token_handler is None:
        raise RuntimeError("TokenHandler not initialized. Call set_token_handler() during app startup.")
    return _token_handler


# =============================================================================
# Database Dependencies
# =============================================================================

async def get_pool() -> asyncpg.Pool:
    """Get the database connection pool."""
    return await get_db_pool()


# =============================================================================
# Request Payload
# =============================================================================

async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Collect the inbound fields of a request.

    GET requests read their query parameters; every other method reads its
    JSON body. An empty or unparseable body yields no fields, which the
    services then report as missing. If the request passed token validation,
    the verified identity is added under ``user_id``.
    """
    if request.method == "GET":
        payload: Dict[str, Any] = dict(request.query_params)
    else:
        try:
            body = await request.json()
        except ValueError:
            body = None
        payload = body if isinstance(body, dict) else {}

    user_id = getattr(request.state, "user_id", None)
    if user_id:
        payload["user_id"] = user_id
    return payload


# =============================================================================
# Repository Dependencies
# =============================================================================

async def get_user_repo(
    pool: asyncpg.Pool = Depends(get_pool)
) -> UserRepository:
    """Get a UserRepository instance."""
    return UserRepository(pool)


async def get_workspace_repo(
    pool: asyncpg.Pool = Depends(get_pool)
) -> WorkspaceRepository:
    """Get a WorkspaceRepository instance."""
    return WorkspaceRepository(pool)


async def get_tests_repo(
    pool: asyncpg.Pool = Depends(get_pool)
) -> TestsRepository:
    """Get a TestsRepository instance."""
    return TestsRepository(pool)


async def get_invitation_repo(
    pool: asyncpg.Pool = Depends(get_pool)
) -> InvitationRepository:
    """Get an InvitationRepository instance."""
    return InvitationRepository(pool)


async def get_color_repo(
    pool: asyncpg.Pool = Depends(get_pool)
) -> ColorRepository:
    """Get a ColorRepository instance."""
    return ColorRepository(pool)


# =============================================================================
# Service Dependencies
# =============================================================================

async def get_user_service(
    repository: UserRepository = Depends(get_user_repo),
    token_handler: TokenHandler = Depends(get_token_handler),
) -> UserService:
    """Get a UserService instance."""
    return UserService(repository, token_handler)


async def get_workspace_service(
    repository: WorkspaceRepository = Depends(get_workspace_repo),
    token_handler: TokenHandler = Depends(get_token_handler),
) -> WorkspaceService:
    """Get a WorkspaceService instance."""
    return WorkspaceService(repository, token_handler)


async def get_tests_service(
    repository: TestsRepository = Depends(get_tests_repo),
    token_handler: TokenHandler = Depends(get_token_handler),
) -> TestsService:
    """Get a TestsService instance."""
    return TestsService(repository, token_handler)


async def get_invitation_service(
    repository: InvitationRepository = Depends(get_invitation_repo),
    token_handler: TokenHandler = Depends(get_token_handler),
) -> InvitationService:
    """Get an InvitationService instance."""
    return InvitationService(repository, token_handler)


async def get_color_service(
    repository: ColorRepository = Depends(get_color_repo),
    token_handler: TokenHandler = Depends(get_token_handler),
) -> ColorService:
    """Get a ColorService instance."""
    return ColorService(repository, token_handler)

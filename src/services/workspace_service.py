"""
Workspace service - handles workspace management operations.
"""
import logging
from typing import Any, Dict, Mapping

from src.auth.exceptions import AlreadyExistsError, AuthenticationError
from src.auth.token_handler import TokenHandler
from src.config import ADMIN_ROLE_MARKER
from src.models import WorkspaceResponse
from src.repositories import FailureKind, WorkspaceRepository
from src.services.base import (
    EntityService,
    optional_fields,
    optional_lists,
    require_fields,
)

logger = logging.getLogger(__name__)

NAME_TAKEN = "A workspace with this name already exists"


class WorkspaceService(EntityService):
    """Service for workspace operations."""

    model = WorkspaceResponse
    singular = "workspace"
    plural = "workspaces"

    def __init__(self, repository: WorkspaceRepository, token_handler: TokenHandler):
        super().__init__(repository, token_handler)

    async def create(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Create a workspace owned by ``admin_id``.

        Only admin ids may create workspaces. The token is minted for the
        admin rather than a separate requester.

        Raises:
            ValidationError: admin_id or name missing
            AuthenticationError: admin_id is not an admin id
            AlreadyExistsError: A workspace already uses the name
            NotFoundError: The insert failed
        """
        fields = require_fields(payload, ("admin_id", "name"), "admin_id or Name are missing")
        admin_id = fields["admin_id"]

        if ADMIN_ROLE_MARKER not in admin_id:
            raise AuthenticationError("Your role does not allow you to create workspaces")

        result = await self.repository.create(admin_id, fields["name"])
        if result.failure == FailureKind.CONFLICT:
            raise AlreadyExistsError(NAME_TAKEN)

        workspace = self.one(result, "Something went wrong with your workspace creation")
        logger.info(f"Created workspace {workspace['workspace_id']} for {admin_id}")
        return self.respond("Workspace created successfully", admin_id, workspace=workspace)

    async def find_one_by_name(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "name"), "requester_id or Name are missing")
        result = await self.repository.find_one_by_name(fields["name"])
        workspace = self.one(result, "Failed to find workspace")
        return self.respond("Workspace found successfully", fields["requester_id"], workspace=workspace)

    async def find_one_by_id(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(
            payload, ("requester_id", "workspace_id"),
            "Missing requester_id or workspace_id",
        )
        result = await self.repository.find_one_by_id(fields["workspace_id"])
        workspace = self.one(result, "Failed to find workspace")
        return self.respond("Workspace found successfully", fields["requester_id"], workspace=workspace)

    async def find_all(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id",), "Missing requester_id")
        result = await self.repository.find_all()
        workspaces = self.many(result, "Failed to find workspaces")
        return self.respond("Workspaces fetched correctly", fields["requester_id"], workspaces=workspaces)

    async def find_all_by_admin(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "admin_id"), "Missing admin_id or requester_id")
        result = await self.repository.find_all_by_admin(fields["admin_id"])
        workspaces = self.many(result, "Failed to find workspaces")
        return self.respond("Workspaces fetched correctly", fields["requester_id"], workspaces=workspaces)

    async def update(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Rename, reassign or replace the guest/test lists of a workspace."""
        fields = require_fields(
            payload, ("requester_id", "workspace_id"),
            "requester_id or workspace_id are missing",
        )
        changes = {
            **optional_fields(payload, ("admin_id", "name")),
            **optional_lists(payload, ("guest_ids", "test_ids")),
        }

        result = await self.repository.update(fields["workspace_id"], **changes)
        if result.failure == FailureKind.CONFLICT:
            raise AlreadyExistsError(NAME_TAKEN)

        workspace = self.one(result, "Failed to update workspace")
        return self.respond("Workspace updated successfully", fields["requester_id"], workspace=workspace)

    async def delete(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.delete_one(payload, "workspace_id", "requester_id or workspace_id are missing")

"""
Workspace repository - handles workspace database operations.
"""
from typing import List, Optional

from src.repositories.base import BaseRepository
from src.repositories.result import RepositoryResult
from src.utils import any_blank


class WorkspaceRepository(BaseRepository):
    """Repository for the workspaces table."""

    table = "workspaces"
    id_column = "workspace_id"
    id_prefix = "workspace"

    async def create(self, admin_id: str, name: str) -> RepositoryResult:
        """
        Create an empty workspace owned by ``admin_id``.

        Name uniqueness is enforced by the database. A clash comes back as a
        CONFLICT result.
        """
        if any_blank(admin_id, name):
            return self._invalid("Missing admin_id or name")

        return await self._insert({
            "workspace_id": self._new_id(),
            "admin_id": admin_id,
            "name": name,
            "guest_ids": [],
            "test_ids": [],
        })

    async def find_one_by_name(self, name: str) -> RepositoryResult:
        """Get workspaces matching a name."""
        return await self._select_where("name", name)

    async def find_one_by_id(self, workspace_id: str) -> RepositoryResult:
        """Get workspaces matching a workspace_id."""
        return await self._select_where("workspace_id", workspace_id)

    async def find_all_by_admin(self, admin_id: str) -> RepositoryResult:
        """Get all workspaces owned by an admin."""
        return await self._select_where("admin_id", admin_id)

    async def update(
        self,
        workspace_id: str,
        admin_id: str = "",
        name: str = "",
        guest_ids: Optional[List[str]] = None,
        test_ids: Optional[List[str]] = None,
    ) -> RepositoryResult:
        """Update the given workspace fields. Empty id lists are left unchanged."""
        return await self._update_columns(workspace_id, {
            "admin_id": admin_id,
            "name": name,
            "guest_ids": guest_ids or [],
            "test_ids": test_ids or [],
        })

    async def delete(self, workspace_id: str) -> RepositoryResult:
        """Delete a workspace. Its tests, invitations and colors are kept."""
        return await self._delete_by_id(workspace_id)

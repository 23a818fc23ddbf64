"""
Tests repository - handles test database operations.
"""
from typing import List, Optional

from src.repositories.base import BaseRepository
from src.repositories.result import RepositoryResult
from src.utils import any_blank


class TestsRepository(BaseRepository):
    """Repository for the tests table."""

    __test__ = False  # not a pytest test class

    table = "tests"
    id_column = "test_id"
    id_prefix = "test"

    async def create(self, admin_id: str, workspace_id: str, subjects: List[str]) -> RepositoryResult:
        """Create a test. ``subjects`` must hold at least one entry."""
        if any_blank(admin_id, workspace_id, subjects):
            return self._invalid("Missing admin_id, workspace_id or subjects")

        return await self._insert({
            "test_id": self._new_id(),
            "admin_id": admin_id,
            "workspace_id": workspace_id,
            "subjects": list(subjects),
        })

    async def find_one_by_id(self, test_id: str) -> RepositoryResult:
        """Get tests matching a test_id."""
        return await self._select_where("test_id", test_id)

    async def find_all_by_admin(self, admin_id: str) -> RepositoryResult:
        """Get all tests created by an admin."""
        return await self._select_where("admin_id", admin_id)

    async def find_all_by_workspace(self, workspace_id: str) -> RepositoryResult:
        """Get all tests in a workspace."""
        return await self._select_where("workspace_id", workspace_id)

    async def update(
        self,
        test_id: str,
        admin_id: str = "",
        workspace_id: str = "",
        subjects: Optional[List[str]] = None,
    ) -> RepositoryResult:
        """Update the given test fields."""
        return await self._update_columns(test_id, {
            "admin_id": admin_id,
            "workspace_id": workspace_id,
            "subjects": subjects or [],
        })

    async def delete(self, test_id: str) -> RepositoryResult:
        """Delete a test."""
        return await self._delete_by_id(test_id)

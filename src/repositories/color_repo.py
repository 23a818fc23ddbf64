"""
Color repository - handles guest color database operations.
"""
from src.repositories.base import BaseRepository
from src.repositories.result import RepositoryResult
from src.utils import any_blank


class ColorRepository(BaseRepository):
    """Repository for the colors table."""

    table = "colors"
    id_column = "color_id"
    id_prefix = "color"

    async def create(self, workspace_id: str, guest_id: str, hex_code: str) -> RepositoryResult:
        """Assign a display color to a guest within a workspace."""
        if any_blank(workspace_id, guest_id, hex_code):
            return self._invalid("Missing workspace_id, guest_id or hex")

        return await self._insert({
            "color_id": self._new_id(),
            "workspace_id": workspace_id,
            "guest_id": guest_id,
            "hex": hex_code,
        })

    async def find_one_by_id(self, color_id: str) -> RepositoryResult:
        """Get colors matching a color_id."""
        return await self._select_where("color_id", color_id)

    async def find_one_by_hex(self, hex_code: str) -> RepositoryResult:
        """Get colors matching a hex value."""
        return await self._select_where("hex", hex_code)

    async def find_all_by_workspace(self, workspace_id: str) -> RepositoryResult:
        """Get all colors assigned in a workspace."""
        return await self._select_where("workspace_id", workspace_id)

    async def update(
        self,
        color_id: str,
        workspace_id: str = "",
        guest_id: str = "",
        hex_code: str = "",
    ) -> RepositoryResult:
        """Update the given color fields."""
        return await self._update_columns(color_id, {
            "workspace_id": workspace_id,
            "guest_id": guest_id,
            "hex": hex_code,
        })

    async def delete(self, color_id: str) -> RepositoryResult:
        """Delete a color."""
        return await self._delete_by_id(color_id)

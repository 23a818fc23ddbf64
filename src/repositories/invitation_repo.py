"""
Invitation repository - handles invitation database operations.
"""
from src.repositories.base import BaseRepository
from src.repositories.result import RepositoryResult
from src.utils import any_blank

PENDING = "pending"


class InvitationRepository(BaseRepository):
    """Repository for the invitations table."""

    table = "invitations"
    id_column = "invitation_id"
    id_prefix = "invitation"

    async def create(self, item_id: str, admin_id: str, guest_id: str, type: str) -> RepositoryResult:
        """
        Invite a guest to an item (a workspace or a test).

        New invitations always start out as ``pending``.
        """
        if any_blank(item_id, admin_id, guest_id, type):
            return self._invalid("Missing item_id, admin_id, guest_id or type")

        return await self._insert({
            "invitation_id": self._new_id(),
            "item_id": item_id,
            "admin_id": admin_id,
            "guest_id": guest_id,
            "type": type,
            "status": PENDING,
        })

    async def find_one_by_id(self, invitation_id: str) -> RepositoryResult:
        """Get invitations matching an invitation_id."""
        return await self._select_where("invitation_id", invitation_id)

    async def find_all_by_guest(self, guest_id: str) -> RepositoryResult:
        """Get all invitations addressed to a guest."""
        return await self._select_where("guest_id", guest_id)

    async def find_all_by_item(self, item_id: str) -> RepositoryResult:
        """Get all invitations for a workspace or test."""
        return await self._select_where("item_id", item_id)

    async def find_all_by_admin(self, admin_id: str) -> RepositoryResult:
        """Get all invitations sent by an admin."""
        return await self._select_where("admin_id", admin_id)

    async def update(
        self,
        invitation_id: str,
        item_id: str = "",
        admin_id: str = "",
        guest_id: str = "",
        type: str = "",
        status: str = "",
    ) -> RepositoryResult:
        """Update the given invitation fields. Any status string is accepted."""
        return await self._update_columns(invitation_id, {
            "item_id": item_id,
            "admin_id": admin_id,
            "guest_id": guest_id,
            "type": type,
            "status": status,
        })

    async def delete(self, invitation_id: str) -> RepositoryResult:
        """Delete an invitation."""
        return await self._delete_by_id(invitation_id)

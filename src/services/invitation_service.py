"""
Invitation service - handles invitations of guests to workspaces and tests.
"""
from typing import Any, Dict, Mapping

from src.auth.token_handler import TokenHandler
from src.models import InvitationResponse
from src.repositories import InvitationRepository
from src.services.base import EntityService, optional_fields, require_fields


class InvitationService(EntityService):
    """Service for invitation operations."""

    model = InvitationResponse
    singular = "invitation"
    plural = "invitations"

    def __init__(self, repository: InvitationRepository, token_handler: TokenHandler):
        super().__init__(repository, token_handler)

    async def create(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Invite a guest. The invitation starts out pending."""
        fields = require_fields(
            payload, ("requester_id", "item_id", "admin_id", "guest_id", "type"),
            "requester_id, item_id, admin_id, guest_id or Type are missing",
        )
        result = await self.repository.create(
            fields["item_id"], fields["admin_id"], fields["guest_id"], fields["type"],
        )
        invitation = self.one(result, "Something went wrong with your invitation creation")
        return self.respond("Invitation created successfully", fields["requester_id"], invitation=invitation)

    async def find_one_by_id(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(
            payload, ("requester_id", "invitation_id"),
            "Missing requester_id or invitation_id",
        )
        result = await self.repository.find_one_by_id(fields["invitation_id"])
        invitation = self.one(result, "Failed to find invitation")
        return self.respond("Invitation found successfully", fields["requester_id"], invitation=invitation)

    async def find_all(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id",), "Missing requester_id")
        result = await self.repository.find_all()
        invitations = self.many(result, "Failed to find invitations")
        return self.respond("Invitations fetched correctly", fields["requester_id"], invitations=invitations)

    async def find_all_by_guest(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "guest_id"), "Missing guest_id or requester_id")
        result = await self.repository.find_all_by_guest(fields["guest_id"])
        invitations = self.many(result, "Failed to find invitations")
        return self.respond("Invitations fetched correctly", fields["requester_id"], invitations=invitations)

    async def find_all_by_item(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "item_id"), "Missing item_id or requester_id")
        result = await self.repository.find_all_by_item(fields["item_id"])
        invitations = self.many(result, "Failed to find invitations")
        return self.respond("Invitations fetched correctly", fields["requester_id"], invitations=invitations)

    async def find_all_by_admin(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "admin_id"), "Missing admin_id or requester_id")
        result = await self.repository.find_all_by_admin(fields["admin_id"])
        invitations = self.many(result, "Failed to find invitations")
        return self.respond("Invitations fetched correctly", fields["requester_id"], invitations=invitations)

    async def update(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Update an invitation, typically to accept or decline it via ``status``."""
        fields = require_fields(
            payload, ("requester_id", "invitation_id"),
            "requester_id or invitation_id are missing",
        )
        changes = optional_fields(payload, ("item_id", "admin_id", "guest_id", "type", "status"))

        result = await self.repository.update(fields["invitation_id"], **changes)
        invitation = self.one(result, "Failed to update invitation")
        return self.respond("Invitation updated successfully", fields["requester_id"], invitation=invitation)

    async def delete(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.delete_one(payload, "invitation_id", "requester_id or invitation_id are missing")

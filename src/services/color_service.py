"""
Color service - handles per-workspace guest display colors.
"""
from typing import Any, Dict, Mapping

from src.auth.token_handler import TokenHandler
from src.models import ColorResponse
from src.repositories import ColorRepository
from src.services.base import EntityService, optional_fields, require_fields


class ColorService(EntityService):
    """Service for color operations."""

    model = ColorResponse
    singular = "color"
    plural = "colors"

    def __init__(self, repository: ColorRepository, token_handler: TokenHandler):
        super().__init__(repository, token_handler)

    async def create(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(
            payload, ("requester_id", "workspace_id", "guest_id", "hex"),
            "requester_id, workspace_id, guest_id or hex are missing",
        )
        result = await self.repository.create(fields["workspace_id"], fields["guest_id"], fields["hex"])
        color = self.one(result, "Something went wrong with your color creation")
        return self.respond("Color created successfully", fields["requester_id"], color=color)

    async def find_one_by_id(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "color_id"), "Missing requester_id or color_id")
        result = await self.repository.find_one_by_id(fields["color_id"])
        color = self.one(result, "Failed to find color")
        return self.respond("Color found successfully", fields["requester_id"], color=color)

    async def find_one_by_hex(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "hex"), "Missing requester_id or hex")
        result = await self.repository.find_one_by_hex(fields["hex"])
        color = self.one(result, "Failed to find color")
        return self.respond("Color found successfully", fields["requester_id"], color=color)

    async def find_all(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id",), "Missing requester_id")
        result = await self.repository.find_all()
        colors = self.many(result, "Failed to find colors")
        return self.respond("Colors fetched correctly", fields["requester_id"], colors=colors)

    async def find_all_by_workspace(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(
            payload, ("requester_id", "workspace_id"),
            "Missing workspace_id or requester_id",
        )
        result = await self.repository.find_all_by_workspace(fields["workspace_id"])
        colors = self.many(result, "Failed to find colors")
        return self.respond("Colors fetched correctly", fields["requester_id"], colors=colors)

    async def update(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "color_id"), "requester_id or color_id are missing")
        changes = optional_fields(payload, ("workspace_id", "guest_id", "hex"))

        result = await self.repository.update(
            fields["color_id"],
            workspace_id=changes["workspace_id"],
            guest_id=changes["guest_id"],
            hex_code=changes["hex"],
        )
        color = self.one(result, "Failed to update color")
        return self.respond("Color updated successfully", fields["requester_id"], color=color)

    async def delete(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.delete_one(payload, "color_id", "requester_id or color_id are missing")

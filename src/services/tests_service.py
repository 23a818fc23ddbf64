"""
Tests service - handles test management within workspaces.
"""
from typing import Any, Dict, Mapping

from src.auth.token_handler import TokenHandler
from src.exceptions import ValidationError
from src.models import TestResponse
from src.repositories import TestsRepository
from src.services.base import (
    EntityService,
    optional_fields,
    optional_lists,
    require_fields,
)
from src.utils import list_field


class TestsService(EntityService):
    """Service for test operations."""

    __test__ = False  # not a pytest test class

    model = TestResponse
    singular = "test"
    plural = "tests"

    def __init__(self, repository: TestsRepository, token_handler: TokenHandler):
        super().__init__(repository, token_handler)

    async def create(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """Create a test in a workspace. At least one subject is required."""
        missing = "requester_id, admin_id, workspace_id or Subjects are missing"
        fields = require_fields(payload, ("requester_id", "admin_id", "workspace_id"), missing)
        subjects = list_field(payload, "subjects")
        if not subjects:
            raise ValidationError(missing)

        result = await self.repository.create(fields["admin_id"], fields["workspace_id"], subjects)
        test = self.one(result, "Something went wrong with your test creation")
        return self.respond("Test created successfully", fields["requester_id"], test=test)

    async def find_one_by_id(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "test_id"), "Missing requester_id or test_id")
        result = await self.repository.find_one_by_id(fields["test_id"])
        test = self.one(result, "Failed to find test")
        return self.respond("Test found successfully", fields["requester_id"], test=test)

    async def find_all(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id",), "Missing requester_id")
        result = await self.repository.find_all()
        tests = self.many(result, "Failed to find tests")
        return self.respond("Tests fetched correctly", fields["requester_id"], tests=tests)

    async def find_all_by_admin(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "admin_id"), "Missing admin_id or requester_id")
        result = await self.repository.find_all_by_admin(fields["admin_id"])
        tests = self.many(result, "Failed to find tests")
        return self.respond("Tests fetched correctly", fields["requester_id"], tests=tests)

    async def find_all_by_workspace(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(
            payload, ("requester_id", "workspace_id"),
            "Missing workspace_id or requester_id",
        )
        result = await self.repository.find_all_by_workspace(fields["workspace_id"])
        tests = self.many(result, "Failed to find tests")
        return self.respond("Tests fetched correctly", fields["requester_id"], tests=tests)

    async def update(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "test_id"), "requester_id or test_id are missing")
        changes = {
            **optional_fields(payload, ("admin_id", "workspace_id")),
            **optional_lists(payload, ("subjects",)),
        }

        result = await self.repository.update(fields["test_id"], **changes)
        test = self.one(result, "Failed to update test")
        return self.respond("Test updated successfully", fields["requester_id"], test=test)

    async def delete(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.delete_one(payload, "test_id", "requester_id or test_id are missing")

"""
User service - handles sign-up, authentication and user management.
"""
import asyncio
import logging
from typing import Any, Dict, Mapping

from src.auth.exceptions import AlreadyExistsError, AuthenticationError
from src.auth.passwords import hash_password, password_too_long, verify_password
from src.auth.token_handler import TokenHandler
from src.config import ORGANISATION_EMAIL_MARKER
from src.exceptions import NotFoundError, ValidationError
from src.models import UserResponse
from src.repositories import FailureKind, UserRepository
from src.services.base import EntityService, optional_fields, require_fields

logger = logging.getLogger(__name__)

PASSWORD_TOO_LONG = "Password is too long"


class UserService(EntityService):
    """Service for user operations."""

    model = UserResponse
    singular = "user"
    plural = "users"

    def __init__(self, repository: UserRepository, token_handler: TokenHandler):
        super().__init__(repository, token_handler)

    async def create(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Sign up a new user.

        Checks run in order: required fields, organisation email marker, email
        shape, password length. The password is stored as a bcrypt hash.

        Raises:
            ValidationError: Missing fields, foreign organisation, malformed email or a
                password longer than 72 bytes
            AlreadyExistsError: The email is already registered
            NotFoundError: The insert failed
        """
        fields = require_fields(
            payload, ("email", "password", "role"),
            "Password, Email or Role are missing",
        )
        email = fields["email"]

        if ORGANISATION_EMAIL_MARKER not in email:
            raise ValidationError("You should be joining only if you are part of the right organisation")

        if "@" not in email or "." not in email:
            raise ValidationError("Email invalid")

        if password_too_long(fields["password"]):
            raise ValidationError(PASSWORD_TOO_LONG)

        password_hash = await asyncio.to_thread(hash_password, fields["password"])
        result = await self.repository.create(email, password_hash, fields["role"])
        if result.failure == FailureKind.CONFLICT:
            raise AlreadyExistsError("This user already exists")

        user = self.one(result, "Something went wrong during the user's creation")
        logger.info(f"Created user {user['user_id']}")
        return self.respond("User created successfully", user["user_id"], user=user)

    async def authenticate(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Log a user in with email and password.

        Raises:
            ValidationError: Email or password missing
            NotFoundError: No user with that email
            AuthenticationError: Wrong password
        """
        fields = require_fields(payload, ("email", "password"), "Email, Password are missing")

        result = await self.repository.find_one_by_email(fields["email"])
        row = result.first
        if not row:
            raise NotFoundError("Failed to find user")

        matches = await asyncio.to_thread(verify_password, fields["password"], row.get("password") or "")
        if not matches:
            raise AuthenticationError("Passwords do not match")

        user = self.serialize(row)
        return self.respond("Authentication successful", user["user_id"], user=user)

    async def find_one_by_email(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "email"), "Missing requester_id or email")
        result = await self.repository.find_one_by_email(fields["email"])
        user = self.one(result, "Failed to find user")
        return self.respond("User found successfully", fields["requester_id"], user=user)

    async def find_one_by_id(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id", "user_id"), "Missing user_id or requester_id")
        result = await self.repository.find_one_by_id(fields["user_id"])
        user = self.one(result, "Failed to find user")
        return self.respond("User found successfully", fields["requester_id"], user=user)

    async def find_all(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        fields = require_fields(payload, ("requester_id",), "requester_id is missing")
        result = await self.repository.find_all()
        users = self.many(result, "Failed to find users")
        return self.respond("Users fetched correctly", fields["requester_id"], users=users)

    async def update(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Update a user's email, password or role.

        A new password is hashed before it is stored.
        """
        fields = require_fields(payload, ("requester_id", "user_id"), "requester_id or user_id are missing")
        changes = optional_fields(payload, ("email", "password", "role"))
        if changes["password"].strip():
            if password_too_long(changes["password"]):
                raise ValidationError(PASSWORD_TOO_LONG)
            changes["password"] = await asyncio.to_thread(hash_password, changes["password"])

        result = await self.repository.update(fields["user_id"], **changes)
        if result.failure == FailureKind.CONFLICT:
            raise AlreadyExistsError("This user already exists")

        user = self.one(result, "Failed to update user")
        return self.respond("User updated successfully", fields["requester_id"], user=user)

    async def delete(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        return await self.delete_one(payload, "user_id", "requester_id or user_id are missing")

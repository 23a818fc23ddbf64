"""
User repository - handles user database operations.
"""
from src.repositories.base import BaseRepository
from src.repositories.result import RepositoryResult
from src.utils import any_blank


class UserRepository(BaseRepository):
    """Repository for the users table."""

    table = "users"
    id_column = "user_id"

    async def create(self, email: str, password: str, role: str) -> RepositoryResult:
        """
        Create a user.

        The user_id is the role followed by random digits (e.g. ``admin0193...``),
        so the id itself carries the role. ``password`` must already be hashed.
        """
        if any_blank(email, password, role):
            return self._invalid("Missing email, password or role")

        user_id = self._new_id(prefix=role)
        return await self._insert({
            "user_id": user_id,
            "email": email,
            "password": password,
            "role": role,
        })

    async def find_one_by_email(self, email: str) -> RepositoryResult:
        """Get users matching an email."""
        return await self._select_where("email", email)

    async def find_one_by_id(self, user_id: str) -> RepositoryResult:
        """Get users matching a user_id."""
        return await self._select_where("user_id", user_id)

    async def update(
        self,
        user_id: str,
        email: str = "",
        password: str = "",
        role: str = "",
    ) -> RepositoryResult:
        """Update the given user fields. ``password`` must already be hashed."""
        return await self._update_columns(user_id, {
            "email": email,
            "password": password,
            "role": role,
        })

    async def delete(self, user_id: str) -> RepositoryResult:
        """Delete a user."""
        return await self._delete_by_id(user_id)

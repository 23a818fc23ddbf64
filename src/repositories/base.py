"""
Base repository - shared create/find/update/delete behaviour for one table.
"""
import asyncio
import logging
import secrets
import string
from typing import Any, Dict

import asyncpg

from src.repositories.result import RepositoryResult
from src.utils import is_blank

logger = logging.getLogger(__name__)

# Faults raised by the storage layer. Anything else is a programming error
# and is allowed to propagate.
STORAGE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    OSError,
    asyncio.TimeoutError,
)

UNIQUE_ID_LENGTH = 20


def generate_unique_id(length: int = UNIQUE_ID_LENGTH) -> str:
    """Generate a random string of decimal digits."""
    return "".join(secrets.choice(string.digits) for _ in range(length))


class BaseRepository:
    """
    Repository for a single table keyed by a prefixed string id.

    Subclasses set ``table``, ``id_column`` and ``id_prefix`` and expose
    entity-specific methods built on the protected helpers below. Every
    helper returns a RepositoryResult and never raises on storage faults.
    """

    table: str = ""
    id_column: str = ""
    id_prefix: str = ""

    def __init__(self, pool: asyncpg.Pool):
        self.pool = pool

    def _new_id(self, prefix: str = "") -> str:
        """Generate a business id such as ``color04829...``."""
        return f"{prefix or self.id_prefix}{generate_unique_id()}"

    def _invalid(self, detail: str) -> RepositoryResult:
        logger.warning(f"[{self.table}] rejected call: {detail}")
        return RepositoryResult.invalid(detail)

    def _storage_error(self, operation: str, error: Exception) -> RepositoryResult:
        logger.error(f"[{self.table}] {operation} failed: {error}")
        return RepositoryResult.storage_error(str(error))

    async def _insert(self, values: Dict[str, Any]) -> RepositoryResult:
        """Insert one row, then return it re-fetched by its business id."""
        columns = ", ".join(values)
        placeholders = ", ".join(f"${i}" for i in range(1, len(values) + 1))
        query = f"INSERT INTO {self.table} ({columns}) VALUES ({placeholders})"
        try:
            await self.pool.execute(query, *values.values())
        except asyncpg.UniqueViolationError as e:
            logger.warning(f"[{self.table}] insert hit a unique constraint: {e}")
            return RepositoryResult.conflict(str(e))
        except STORAGE_ERRORS as e:
            return self._storage_error("insert", e)

        return await self._select_where(self.id_column, values[self.id_column])

    async def _select_where(self, column: str, value: Any) -> RepositoryResult:
        """Return every row whose ``column`` equals ``value``."""
        if is_blank(value):
            return self._invalid(f"Missing {column}")

        try:
            rows = await self.pool.fetch(
                f"SELECT * FROM {self.table} WHERE {column} = $1",
                value,
            )
        except STORAGE_ERRORS as e:
            return self._storage_error(f"select by {column}", e)
        return RepositoryResult.success([dict(row) for row in rows])

    async def find_all(self) -> RepositoryResult:
        """Return every row in the table, in no particular order."""
        try:
            rows = await self.pool.fetch(f"SELECT * FROM {self.table}")
        except STORAGE_ERRORS as e:
            return self._storage_error("select all", e)
        return RepositoryResult.success([dict(row) for row in rows])

    async def _update_columns(self, entity_id: str, changes: Dict[str, Any]) -> RepositoryResult:
        """
        Write each non-blank value in ``changes`` to its column.

        One UPDATE statement is issued per column, all inside a single
        transaction. Blank values leave their column untouched. The row is
        re-fetched afterwards, even when nothing was written.
        """
        if is_blank(entity_id):
            return self._invalid(f"Missing {self.id_column}")

        writes = {column: value for column, value in changes.items() if not is_blank(value)}
        if writes:
            try:
                async with self.pool.acquire() as conn:
                    async with conn.transaction():
                        for column, value in writes.items():
                            await conn.execute(
                                f"UPDATE {self.table} SET {column} = $1, updated_at = NOW() "
                                f"WHERE {self.id_column} = $2",
                                value,
                                entity_id,
                            )
            except asyncpg.UniqueViolationError as e:
                logger.warning(f"[{self.table}] update hit a unique constraint: {e}")
                return RepositoryResult.conflict(str(e))
            except STORAGE_ERRORS as e:
                return self._storage_error("update", e)

        return await self._select_where(self.id_column, entity_id)

    async def _delete_by_id(self, entity_id: str) -> RepositoryResult:
        """Delete rows matching the id. Succeeds even if nothing matched."""
        if is_blank(entity_id):
            return self._invalid(f"Missing {self.id_column}")

        try:
            await self.pool.execute(
                f"DELETE FROM {self.table} WHERE {self.id_column} = $1",
                entity_id,
            )
        except STORAGE_ERRORS as e:
            return self._storage_error("delete", e)
        return RepositoryResult.success(True)

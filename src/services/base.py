"""
Shared request handling for entity services.

Each service validates an inbound payload, calls one repository, and shapes
the result into a response body carrying the resource, a fresh token for the
acting identity, and ``success: true``. Failures are raised as
MatrixException subclasses and rendered by the app's exception handlers.
"""
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from pydantic import BaseModel

from src.auth.token_handler import TokenHandler
from src.exceptions import NotFoundError, ValidationError
from src.repositories.result import RepositoryResult
from src.utils import is_blank, list_field, text_field

logger = logging.getLogger(__name__)


def require_fields(payload: Mapping[str, Any], fields: Iterable[str], message: str) -> Dict[str, str]:
    """
    Read required text fields from a payload.

    Raises:
        ValidationError: If any field is absent, empty or whitespace-only
    """
    values = {field: text_field(payload, field) for field in fields}
    if any(is_blank(value) for value in values.values()):
        raise ValidationError(message)
    return values


def optional_fields(payload: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, str]:
    """Read optional text fields, mapping absent values to an empty string."""
    return {field: text_field(payload, field) or "" for field in fields}


def optional_lists(payload: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, List[str]]:
    """Read optional list fields, mapping absent values to an empty list."""
    return {field: list_field(payload, field) for field in fields}


class EntityService:
    """
    Base class for the per-entity services.

    Subclasses set ``model`` (the response model rows are validated into),
    ``singular`` and ``plural`` (the response keys for one row and for a
    collection).
    """

    model: Type[BaseModel]
    singular: str = ""
    plural: str = ""

    def __init__(self, repository, token_handler: TokenHandler):
        self.repository = repository
        self.token_handler = token_handler

    def serialize(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate a row into the response model and dump it as JSON-ready data."""
        return self.model.model_validate(dict(row)).model_dump(mode="json")

    def respond(self, message: str, subject_id: Optional[str], **resources: Any) -> Dict[str, Any]:
        """Build a success body with a freshly minted token for ``subject_id``."""
        return {
            "message": message,
            **resources,
            "token": self.token_handler.generate_token(subject_id),
            "success": True,
        }

    def one(self, result: RepositoryResult, failure_message: str) -> Dict[str, Any]:
        """
        Extract the single row of a result.

        Raises:
            NotFoundError: If the call failed or matched nothing
        """
        row = result.first
        if not row:
            logger.info(f"{self.singular}: {failure_message} ({result.failure or 'no rows'})")
            raise NotFoundError(failure_message)
        return self.serialize(row)

    def many(self, result: RepositoryResult, failure_message: str) -> List[Dict[str, Any]]:
        """
        Extract every row of a result. An empty collection is not found.

        Raises:
            NotFoundError: If the call failed or matched nothing
        """
        if not result.first:
            logger.info(f"{self.plural}: {failure_message} ({result.failure or 'no rows'})")
            raise NotFoundError(failure_message)
        return [self.serialize(row) for row in result.value]

    async def delete_one(self, payload: Mapping[str, Any], id_field: str, missing_message: str) -> Dict[str, Any]:
        """Delete the row named by ``payload[id_field]`` on behalf of ``requester_id``."""
        fields = require_fields(payload, ("requester_id", id_field), missing_message)

        result = await self.repository.delete(fields[id_field])
        if not result:
            raise NotFoundError(f"Failed to delete {self.singular}")

        return self.respond(
            f"{self.singular.capitalize()} deleted successfully",
            fields["requester_id"],
        )

"""
FastAPI authentication dependencies.

Provides the token gate for protected endpoints.
"""
from typing import Any, Dict

from fastapi import Depends, Request

from src.auth.token_handler import TokenHandler
from src.dependencies import get_token_handler, read_payload


async def require_token(
    request: Request,
    token_handler: TokenHandler = Depends(get_token_handler),
) -> str:
    """
    Dependency that requires a valid bearer token.

    Usage:
        @router.put("/update")
        async def update(user_id: str = Depends(require_token)):
            ...

    Returns:
        The verified user id

    Raises:
        TokenMissingError: No token was sent (401)
        TokenExpiredError: The token failed verification (403)
    """
    return await token_handler.validate_token(request)


async def read_authorized_payload(
    request: Request,
    user_id: str = Depends(require_token),
) -> Dict[str, Any]:
    """Read the request payload after the token gate, identity included."""
    return await read_payload(request)

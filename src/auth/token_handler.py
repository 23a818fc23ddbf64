"""
Access token issuing and verification.

Tokens are HS256 JWTs carrying the acting user's id. Every successful
response mints a fresh token, so a client stays authenticated for as long
as it keeps making calls within the validity window.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from fastapi import Request

from src.auth.exceptions import TokenExpiredError, TokenMissingError
from src.utils import is_blank

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer"


class TokenHandler:
    """Issues and verifies short-lived signed access tokens."""

    def __init__(self, secret: str, expiry_seconds: int = 3600, algorithm: str = "HS256"):
        self._secret = secret
        self._expiry = timedelta(seconds=expiry_seconds)
        self._algorithm = algorithm

    def generate_token(self, subject_id: Optional[str]) -> Optional[str]:
        """
        Mint a token for the given user id.

        Returns None when the subject is blank, as there is no identity to
        sign for.
        """
        if is_blank(subject_id):
            logger.error("Cannot generate a token without a subject id")
            return None

        now = datetime.now(timezone.utc)
        payload = {
            "user_id": subject_id,
            "iat": now,
            "exp": now + self._expiry,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode_token(self, token: str) -> str:
        """
        Verify a token and return the user id it was issued for.

        Raises:
            TokenExpiredError: On any verification failure (bad signature,
                expired, malformed or missing claim)
        """
        try:
            claims = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.PyJWTError as e:
            logger.warning(f"Token verification failed: {e}")
            raise TokenExpiredError()

        user_id = claims.get("user_id")
        if is_blank(user_id) or not isinstance(user_id, str):
            logger.warning("Token verified but carries no user_id claim")
            raise TokenExpiredError()
        return user_id

    async def validate_token(self, request: Request) -> str:
        """
        Gate a request on its ``Authorization: Bearer <token>`` header.

        On success the verified user id is stored on ``request.state.user_id``
        where the payload readers pick it up.

        Raises:
            TokenMissingError: Header absent, or no token after the scheme
            TokenExpiredError: Token present but fails verification
        """
        token = extract_bearer_token(request.headers.get("Authorization"))
        user_id = self.decode_token(token)
        request.state.user_id = user_id
        return user_id


def extract_bearer_token(authorization: Optional[str]) -> str:
    """
    Extract the token from an Authorization header value.

    Raises:
        TokenMissingError: If the header is empty or carries no token
    """
    if is_blank(authorization):
        raise TokenMissingError()

    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_PREFIX:
        raise TokenMissingError()
    return parts[1]

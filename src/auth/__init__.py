"""
Authentication module for Matrix Backend.

Provides access token issuing and verification, password hashing,
and the token gate used by protected routes.
"""

from src.auth.config import (
    ACCESS_JWT_TOKEN,
    ACCESS_TOKEN_EXPIRY,
    JWT_ALGORITHM,
)
from src.auth.exceptions import (
    AuthenticationError,
    AuthorizationError,
    TokenMissingError,
    TokenExpiredError,
    AlreadyExistsError,
)
from src.auth.token_handler import TokenHandler
from src.auth.passwords import hash_password, password_too_long, verify_password

__all__ = [
    # Config
    "ACCESS_JWT_TOKEN",
    "ACCESS_TOKEN_EXPIRY",
    "JWT_ALGORITHM",
    # Exceptions
    "AuthenticationError",
    "AuthorizationError",
    "TokenMissingError",
    "TokenExpiredError",
    "AlreadyExistsError",
    # Tokens and passwords
    "TokenHandler",
    "hash_password",
    "password_too_long",
    "verify_password",
]

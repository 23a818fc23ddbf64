"""
Authentication and authorization exceptions.
"""
from fastapi import status

from src.exceptions import MatrixException


class AuthenticationError(MatrixException):
    """Raised when authentication fails."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)


class TokenMissingError(AuthenticationError):
    """Raised when no bearer token accompanies a gated request."""

    def __init__(self, message: str = "Token missing"):
        super().__init__(message)


class AuthorizationError(MatrixException):
    """Raised when the caller is not allowed to perform an action."""

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, status.HTTP_403_FORBIDDEN)


class TokenExpiredError(AuthorizationError):
    """Raised when the token fails verification.

    Expired, tampered and malformed tokens are reported the same way.
    """

    def __init__(self, message: str = "Token expired"):
        super().__init__(message)


class AlreadyExistsError(AuthorizationError):
    """Raised when a unique resource (email, workspace name) is taken."""

    def __init__(self, message: str):
        super().__init__(message)

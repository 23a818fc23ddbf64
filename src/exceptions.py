"""
Custom exception classes and error handling.

This module provides custom exceptions and utilities for consistent
error handling across the application. Every error response has the
shape ``{"message": str, "success": false}``.
"""
import logging

from fastapi import Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class MatrixException(Exception):
    """Base exception for all Matrix-specific errors."""

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationError(MatrixException):
    """Raised when required request fields are missing or malformed."""

    def __init__(self, message: str):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)


class NotFoundError(MatrixException):
    """Raised when the repository layer returned nothing usable."""

    def __init__(self, message: str):
        super().__init__(message, status.HTTP_404_NOT_FOUND)


# =============================================================================
# Exception Handlers
# =============================================================================

def error_body(message: str) -> dict:
    """Build the JSON body shared by every failed response."""
    return {"message": message, "success": False}


async def matrix_exception_handler(request: Request, exc: MatrixException) -> JSONResponse:
    """Handle MatrixException instances."""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions without leaking internals to the caller."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error"),
    )


def register_exception_handlers(app):
    """
    Register all custom exception handlers with the FastAPI app.

    Call this during app initialization:
        from src.exceptions import register_exception_handlers
        register_exception_handlers(app)
    """
    app.add_exception_handler(MatrixException, matrix_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

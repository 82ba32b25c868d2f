"""Custom exceptions for the Community Hub backend.

This module defines all custom exceptions used throughout the application.
"""

from typing import Any


class HubException(Exception):
    """Base exception class for the Community Hub backend."""

    def __init__(
        self,
        message: str,
        error_code: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# Database Exceptions - Granular Types
class DatabaseConnectionError(HubException):
    """Raised when the database cannot be reached.

    Clients only see the generic message; the driver error stays in ``details``.
    """

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message="Database unavailable",
            error_code="DATABASE_CONNECTION_ERROR",
            status_code=503,  # Service Unavailable
            details=details or {"reason": reason},
        )


class DatabaseInitializationError(HubException):
    """Raised when database initialization fails (schema creation, etc.)."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=f"Database initialization error: {reason}",
            error_code="DATABASE_INITIALIZATION_ERROR",
            status_code=500,
            details=details or {"reason": reason},
        )


class DatabaseQueryError(HubException):
    """Raised when a read or write against the store fails.

    The message is what the caller sees, so it stays generic
    (e.g. "Failed to fetch plugins"); the driver error goes in ``details``.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            error_code="DATABASE_QUERY_ERROR",
            status_code=500,
            details=details,
        )


class DatabaseSessionError(HubException):
    """Raised when there's an error with database session management."""

    def __init__(self, reason: str, details: dict[str, Any] | None = None):
        super().__init__(
            message="Database session error",
            error_code="DATABASE_SESSION_ERROR",
            status_code=500,
            details=details or {"reason": reason},
        )

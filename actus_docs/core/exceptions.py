"""
Custom exception classes for the application.

Defines domain-specific exceptions with appropriate HTTP status codes
and error messages for consistent error handling across the API.
"""

from typing import Any


class BaseAPIError(Exception):
    """Base exception class for all API exceptions."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize API exception.

        Args:
            message: Human-readable error message
            status_code: HTTP status code
            details: Additional error details
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ResourceNotFoundError(BaseAPIError):
    """Raised when requested resource doesn't exist."""

    def __init__(self, resource: str, identifier: str | None = None) -> None:
        message = f"{resource} not found"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404)


class DocumentNotFoundError(ResourceNotFoundError):
    """Raised when a slug resolves to no file after the fallback chain."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__("Document", slug)


class ValidationError(BaseAPIError):
    """Raised when input validation fails."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message=message, status_code=422, details=details)

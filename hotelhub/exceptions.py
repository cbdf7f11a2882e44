"""
HotelHub Backend: Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the error scenarios the API reports.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return JSON error responses with the matching HTTP status code.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    HotelHubError (base)
    ├── ValidationError    → 400 Bad Request      {"error": message}
    ├── NotFoundError      → 404 Not Found        {"message": message}
    ├── FileStorageError   → 500 Internal Error   {"error": message}
    └── DatabaseError      → 500 Internal Error   {"error": message}

Backend failures carry the raw driver / OS error text as their message and
that text is returned to the caller unchanged.
"""

from typing import Any, Dict, Optional


class HotelHubError(Exception):
    """
    Base exception for all HotelHub application errors.

    Attributes:
        message:  Error description returned in the API response
        context:  Additional debug info (logged, not returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(HotelHubError):
    """
    Raised when client input fails a presence or count check.

    When:    Missing slug/title on hotel creation, too many image files.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(HotelHubError):
    """
    Raised when a slug lookup matches zero rows.

    The message names the resource ("Hotel not found", "Room not found") so a
    client can tell a missing parent hotel from a missing room.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "Resource",
        slug: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if slug:
            ctx["slug"] = slug
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource


class FileStorageError(HotelHubError):
    """
    Raised when the upload sink cannot write a file.

    When:    Disk full, permission denied, directory not writable, I/O error.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "File storage operation failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(HotelHubError):
    """
    Raised when a database statement fails.

    When:    Connection lost, unique/foreign-key violation, bad value for a
             column type, timeout.
    HTTP:    500 Internal Server Error
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

    @classmethod
    def from_exception(cls, exc: Exception, **context: Any) -> "DatabaseError":
        """Wrap a SQLAlchemy error, keeping the underlying driver message."""
        orig = getattr(exc, "orig", None)
        message = str(orig) if orig is not None else str(exc)
        context["error_type"] = type(exc).__name__
        return cls(message=message, context=context)

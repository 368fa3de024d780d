"""
City Info Backend — Custom Exception Hierarchy
================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by routes and the repository; caught by global handlers.

Exception Hierarchy:
    CityInfoError (base)      → 500 Internal Server Error
    ├── ValidationError       → 400 Bad Request (client can fix)
    ├── NotFoundError         → 404 Not Found
    └── DatabaseError         → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class CityInfoError(Exception):
    """
    Base exception for all City Info application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CityInfoError):
    """
    Raised when client input fails validation.

    When:    A patch document is malformed, targets an unknown member, fails a
             `test` operation, or produces a DTO that violates the update rules.
    HTTP:    400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "The patch document produced an invalid point of interest",
            "details": {"errors": [{"loc": ["name"], "msg": "..."}]}
        }
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


class NotFoundError(CityInfoError):
    """
    Raised when a requested resource does not exist.

    When:    The city in the route is unknown, or the point of interest is
             unknown or belongs to a different city.
    HTTP:    404 Not Found

    SQLAlchemy returns None for missing records (not an exception); routes
    convert None into this exception before touching the store.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=message, context=ctx)


class DatabaseError(CityInfoError):
    """
    Raised when database operations fail unexpectedly.

    When:    Commit failed (connection lost, constraint violation, deadlock).
    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the context is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

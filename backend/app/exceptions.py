"""
Shelter Admin Backend — Custom Exception Hierarchy
====================================================

What:  Application-specific exceptions for the error conditions services raise.
How:   Each exception carries a message, an optional context dict, and the
       HTTP status it maps to. Global exception handlers (registered in
       main.py) turn them into the `{data: null, code, message}` envelope.
Who:   Raised by services and the auth dependency; caught by global handlers.

Exception Hierarchy:
    ShelterError (base)
    ├── BadRequestError          → 400 Bad Request
    │   └── InvalidStateError    → 400 (status/count precondition violated)
    ├── AuthenticationError      → 401 Unauthorized
    ├── NotFoundError            → 404 Not Found
    ├── ConflictError            → 409 Conflict
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class ShelterError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        status_code:  HTTP status used by the global handler
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(ShelterError):
    """The client sent something the service cannot act on."""

    status_code = 400

    def __init__(
        self,
        message: str = "Bad request",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidStateError(BadRequestError):
    """
    Raised when an action's precondition on the current status or count fails.

    Examples: approving an application that is no longer pending, joining a
    full activity.
    """

    def __init__(
        self,
        message: str = "The operation is not allowed in the current state",
        current: Optional[str] = None,
        target: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if current is not None:
            ctx["current"] = current
        if target is not None:
            ctx["target"] = target
        super().__init__(message=message, context=ctx)


class AuthenticationError(ShelterError):
    """Missing, expired or invalid token, bad credentials, or a disabled account."""

    status_code = 401

    def __init__(
        self,
        message: str = "Authentication failed",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(ShelterError):
    """
    Raised when a requested resource does not exist.

    SQLAlchemy returns None for missing rows; services convert that into this
    exception so the HTTP layer can answer 404.
    """

    status_code = 404

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


class ConflictError(ShelterError):
    """A uniqueness rule the service checks itself (e.g. usernames) was violated."""

    status_code = 409

    def __init__(
        self,
        message: str = "The resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatabaseError(ShelterError):
    """
    Raised when a database operation fails in a way a service can name.

    The message returned to the client is always generic; the context is
    logged server-side only.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

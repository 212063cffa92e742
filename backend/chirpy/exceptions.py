"""
Chirpy Backend — Custom Exception Hierarchy
============================================

What:  Application-specific exceptions, one per error category.
Why:   Services raise these; global handlers registered in main.py map each
       one to its HTTP status and a uniform `{"error": <message>}` body.
How:   Each exception carries a user-facing message and an optional context
       dict. The context is logged server-side and never returned.

Exception Hierarchy:
    ChirpyError (base)
    ├── MalformedRequestError    → 400 Bad Request (body cannot be decoded)
    ├── DomainRejectionError     → 400 Bad Request (well-formed but rejected)
    │   └── ChirpTooLongError
    ├── ForbiddenError           → 403 Forbidden (platform gate)
    └── PersistenceError         → 500 Internal Server Error (storage failure)

All errors are terminal for the current request; nothing is retried.
"""

from typing import Any, Dict, Optional

INVALID_BODY_MESSAGE = "Invalid request body"
CHIRP_TOO_LONG_MESSAGE = "Chirp is too long"
FORBIDDEN_MESSAGE = "Forbidden"


class ChirpyError(Exception):
    """
    Base exception for all Chirpy application errors.

    Attributes:
        message:  User-facing error description (returned as the `error` field)
        context:  Additional debug info (logged but NOT returned to client)
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


class MalformedRequestError(ChirpyError):
    """
    Raised when the request body cannot be decoded into the expected shape.

    HTTP: 400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = INVALID_BODY_MESSAGE,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DomainRejectionError(ChirpyError):
    """
    Raised when a well-formed request breaks a business rule.

    HTTP: 400 Bad Request
    """

    status_code = 400


class ChirpTooLongError(DomainRejectionError):
    """Chirp body exceeds the maximum length."""

    def __init__(
        self,
        length: int,
        max_length: int,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["length"] = length
        ctx["max_length"] = max_length
        super().__init__(message=CHIRP_TOO_LONG_MESSAGE, context=ctx)
        self.length = length
        self.max_length = max_length


class ForbiddenError(ChirpyError):
    """
    Raised when the platform gate refuses a destructive operation.

    HTTP: 403 Forbidden

    Raised before any mutation is attempted, so a 403 always leaves state
    untouched.
    """

    status_code = 403

    def __init__(
        self,
        message: str = FORBIDDEN_MESSAGE,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class PersistenceError(ChirpyError):
    """
    Raised when a storage-layer operation fails.

    When:    Constraint violation, lost connection, missing table, etc.
    HTTP:    500 Internal Server Error

    The message is generic and safe to return. Driver details (SQL,
    constraint names) only go into `context`, which is logged server-side.
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)

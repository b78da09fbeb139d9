"""
Kurator Backend — Custom Exception Hierarchy
==============================================

What:  Defines the closed set of application errors.
How:   Each exception class carries a message and the HTTP status it maps to.
       The global exception handlers (registered in main.py) turn them into
       the JSON error envelope; routes never build error responses themselves.
Who:   Raised by the WordStore adapter; caught by global handlers.

Exception Hierarchy:
    KuratorError (base)
    ├── QueryError              → 400 (a MongoDB operation failed)
    ├── DataAccessError         → 400 (stored document has the wrong shape)
    ├── InvalidIDError          → 400
    ├── NotFoundError           → 400 (lookup matched no document)
    ├── HashingError            → 400
    ├── PasswordTooShortError   → 400
    └── UnsafePasswordError     → 409

    The password and hashing kinds belong to the account API the frontend
    does not use yet; they keep their status mapping so the envelope stays
    stable when those endpoints return.
"""

from typing import Any, Dict, Optional


class KuratorError(Exception):
    """
    Base exception for all Kurator application errors.

    Attributes:
        message:      Human-readable error description (returned in the envelope)
        status_code:  HTTP status the error maps to
        context:      Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 400
    default_message: str = "An unexpected error occurred"

    def __init__(
        self,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class QueryError(KuratorError):
    """
    Raised when a MongoDB operation fails.

    Wraps the driver exception so its text reaches the client as context,
    e.g. "error during mongodb query: connection refused".
    """

    def __init__(self, cause: Exception, context: Optional[Dict[str, Any]] = None):
        super().__init__(message=f"error during mongodb query: {cause}", context=context)
        self.cause = cause


class DataAccessError(KuratorError):
    """Raised when a stored document cannot be read as a Word."""

    def __init__(self, cause: Exception, context: Optional[Dict[str, Any]] = None):
        super().__init__(message=f"could not access field in document: {cause}", context=context)
        self.cause = cause


class InvalidIDError(KuratorError):
    def __init__(self, identifier: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message=f"invalid id used: {identifier}", context=context)
        self.identifier = identifier


class NotFoundError(KuratorError):
    """
    Raised when a lookup by key matches no document.

    Motor returns None for a missing document (not an exception); the
    adapter converts None into this error.
    """

    default_message = "word not found error"

    def __init__(self, word: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        if word is not None:
            ctx["word"] = word
        super().__init__(context=ctx)


class HashingError(KuratorError):
    default_message = "hashing error"


class PasswordTooShortError(KuratorError):
    default_message = "password must be at least 8 characters long"


class UnsafePasswordError(KuratorError):
    status_code = 409
    default_message = "unsafe password"

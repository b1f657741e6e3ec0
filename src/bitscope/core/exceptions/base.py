"""Base exceptions for bitscope.

This module defines the base exception hierarchy for the bitscope library.
All exceptions inherit from BitscopeError and carry an error code and
structured details so adapters can report failures without parsing messages.
"""

from typing import Any, Dict, Optional


class BitscopeError(Exception):
    """Base exception for all bitscope errors.

    Every failure raised by the library is local and recoverable; the object
    that raised it is left exactly as it was before the call.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}


class ValidationError(BitscopeError):
    """Base class for input validation errors."""
    pass


class InvalidNameError(ValidationError):
    """Raised when a permission or scope name is empty or not a string."""

    def __init__(self, name: Any, kind: str = "permission"):
        super().__init__(
            f"{kind.capitalize()} name must be a non-empty string, got: {name!r}",
            details={"name": name, "kind": kind},
        )
        self.name = name
        self.kind = kind


def create_error_response(exception: BitscopeError) -> Dict[str, Any]:
    """Create standardized error response from exception.

    Args:
        exception: The bitscope exception

    Returns:
        Error response dictionary
    """
    return {
        "error": {
            "code": exception.error_code,
            "message": exception.message,
            "details": exception.details,
            "type": exception.__class__.__name__,
        }
    }

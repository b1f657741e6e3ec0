"""Codec exceptions.

Raised while decoding numeric forms against a schema and while converting
scopes to and from structured documents.
"""

from typing import Any, Dict, Optional

from .base import BitscopeError


class CodecError(BitscopeError):
    """Base class for encode/decode errors."""
    pass


class SchemaMismatchError(CodecError):
    """Raised when a numeric or tuple form does not fit the supplied schema."""

    def __init__(self, message: str, path: str, **details):
        super().__init__(message, details={"path": path, **details})
        self.path = path


class DocumentError(CodecError):
    """Base class for structured document conversion errors."""

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        original_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = dict(details or {})
        error_details["format"] = format_name
        if original_error is not None:
            error_details["original_error"] = {
                "type": type(original_error).__name__,
                "message": str(original_error),
            }
        super().__init__(message, details=error_details)
        self.format_name = format_name
        self.original_error = original_error


class DocumentSerializationError(DocumentError):
    """Raised when a scope cannot be written to a document format."""
    pass


class DocumentDeserializationError(DocumentError):
    """Raised when a document cannot be read back into a scope."""
    pass

"""Exceptions module for bitscope.

This module provides the complete exception hierarchy for bitscope,
organized by the entity or codec that raises them.
"""

from .base import (
    BitscopeError,
    ValidationError,
    InvalidNameError,
    create_error_response,
)

from .permission import (
    PermissionError,
    ShiftOverflowError,
    PermissionStateError,
    AlreadyGrantedError,
    AlreadyRevokedError,
)

from .scope import (
    ScopeError,
    ScopeFullError,
    DuplicatePermissionError,
    DuplicateScopeError,
    ShiftConflictError,
    UnknownPermissionError,
    UnknownScopeError,
)

from .codec import (
    CodecError,
    SchemaMismatchError,
    DocumentError,
    DocumentSerializationError,
    DocumentDeserializationError,
)

__all__ = [
    # Base
    "BitscopeError",
    "ValidationError",
    "InvalidNameError",
    "create_error_response",

    # Permission Errors
    "PermissionError",
    "ShiftOverflowError",
    "PermissionStateError",
    "AlreadyGrantedError",
    "AlreadyRevokedError",

    # Scope Errors
    "ScopeError",
    "ScopeFullError",
    "DuplicatePermissionError",
    "DuplicateScopeError",
    "ShiftConflictError",
    "UnknownPermissionError",
    "UnknownScopeError",

    # Codec Errors
    "CodecError",
    "SchemaMismatchError",
    "DocumentError",
    "DocumentSerializationError",
    "DocumentDeserializationError",
]

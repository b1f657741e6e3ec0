"""bitscope - named permission flags packed into compact integers.

Permissions are single named bits grouped into scopes of up to 52 flags.
A scope encodes to one unsigned integer that stays within the 53-bit safe
range of JavaScript-style runtimes, and a tree of scopes encodes to a nested
``(value, {child: ...})`` tuple, small enough to embed in token claims.
"""

from .__version__ import __version__

from .core.entities import Permission, Scope
from .core.value_objects import GrantState, MAX_SHIFT, MAX_PERMISSIONS, MAX_SCOPE_VALUE
from .core.protocols import DocumentCodec

from .core.exceptions import (
    BitscopeError,
    ValidationError,
    InvalidNameError,
    ShiftOverflowError,
    PermissionStateError,
    AlreadyGrantedError,
    AlreadyRevokedError,
    ScopeError,
    ScopeFullError,
    DuplicatePermissionError,
    DuplicateScopeError,
    ShiftConflictError,
    UnknownPermissionError,
    UnknownScopeError,
    CodecError,
    SchemaMismatchError,
    DocumentError,
    DocumentSerializationError,
    DocumentDeserializationError,
    create_error_response,
)

from .codec import (
    as_u64,
    as_tuple,
    decode,
    schema_of,
    PermissionSpec,
    ScopeSchema,
)

from .infrastructure import (
    PermissionDocument,
    ScopeDocument,
    StructuredDocumentCodec,
    CompactTupleCodec,
    JSONScopeSerializer,
)

from .config import BitscopeSettings, get_settings, setup_logging

__all__ = [
    "__version__",

    # Entities
    "Permission",
    "Scope",
    "GrantState",
    "MAX_SHIFT",
    "MAX_PERMISSIONS",
    "MAX_SCOPE_VALUE",

    # Codec
    "as_u64",
    "as_tuple",
    "decode",
    "schema_of",
    "PermissionSpec",
    "ScopeSchema",

    # Documents
    "DocumentCodec",
    "PermissionDocument",
    "ScopeDocument",
    "StructuredDocumentCodec",
    "CompactTupleCodec",
    "JSONScopeSerializer",

    # Exceptions
    "BitscopeError",
    "ValidationError",
    "InvalidNameError",
    "ShiftOverflowError",
    "PermissionStateError",
    "AlreadyGrantedError",
    "AlreadyRevokedError",
    "ScopeError",
    "ScopeFullError",
    "DuplicatePermissionError",
    "DuplicateScopeError",
    "ShiftConflictError",
    "UnknownPermissionError",
    "UnknownScopeError",
    "CodecError",
    "SchemaMismatchError",
    "DocumentError",
    "DocumentSerializationError",
    "DocumentDeserializationError",
    "create_error_response",

    # Configuration
    "BitscopeSettings",
    "get_settings",
    "setup_logging",
]

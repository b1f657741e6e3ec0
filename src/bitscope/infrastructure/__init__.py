"""Infrastructure adapters around the core model.

- documents/: structured and compact document codecs
- serializers/: JSON bytes on top of any document codec
"""

from .documents import (
    PermissionDocument,
    ScopeDocument,
    StructuredDocumentCodec,
    CompactTupleCodec,
)
from .serializers import JSONScopeSerializer

__all__ = [
    "PermissionDocument",
    "ScopeDocument",
    "StructuredDocumentCodec",
    "CompactTupleCodec",
    "JSONScopeSerializer",
]

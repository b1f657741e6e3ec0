"""Document codecs implementing the DocumentCodec protocol."""

from .models import PermissionDocument, ScopeDocument
from .structured_codec import StructuredDocumentCodec
from .compact_codec import CompactTupleCodec

__all__ = [
    "PermissionDocument",
    "ScopeDocument",
    "StructuredDocumentCodec",
    "CompactTupleCodec",
]

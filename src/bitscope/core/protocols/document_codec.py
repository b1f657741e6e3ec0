"""Document codec protocol.

Contract for adapters that convert a scope tree into a structured document
(name, shift, grant state and children for every node) and back. New formats
plug in here without touching the permission or scope entities.
"""

from typing import Protocol, TypeVar, runtime_checkable

from ..entities import Scope

DocumentT = TypeVar("DocumentT")


@runtime_checkable
class DocumentCodec(Protocol[DocumentT]):
    """Structured document codec protocol."""

    def encode(self, scope: Scope) -> DocumentT:
        """Convert a scope tree into a document.

        Raises:
            DocumentSerializationError: If the scope cannot be represented
        """
        ...

    def decode(self, document: DocumentT) -> Scope:
        """Rebuild a scope tree from a document.

        All entity validation applies while rebuilding, so malformed
        documents surface as the same errors direct construction raises.

        Raises:
            DocumentDeserializationError: If the document is malformed
        """
        ...

    def get_format_name(self) -> str:
        """Short format identifier (e.g. 'structured', 'compact')."""
        ...

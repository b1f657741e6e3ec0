"""Structured document codec.

Converts a scope tree to a ScopeDocument and back, keeping names, explicit
shifts and grant state so the rebuilt tree needs no out-of-band schema.
"""

import logging
from typing import Any, Mapping, Union

from pydantic import ValidationError as PydanticValidationError

from ...core.entities import Scope
from ...core.exceptions import DocumentDeserializationError
from .models import PermissionDocument, ScopeDocument

logger = logging.getLogger(__name__)


class StructuredDocumentCodec:
    """Scope <-> ScopeDocument codec."""

    FORMAT_NAME = "structured"

    def get_format_name(self) -> str:
        return self.FORMAT_NAME

    def encode(self, scope: Scope) -> ScopeDocument:
        return ScopeDocument(
            name=scope.name,
            permissions=[
                PermissionDocument(name=p.name, shift=p.shift, granted=p.is_granted)
                for p in scope
            ],
            children=[self.encode(child) for child in scope.children.values()],
        )

    def decode(self, document: Union[ScopeDocument, Mapping[str, Any]]) -> Scope:
        """Rebuild a scope tree from a document or its plain-dict form.

        Raises:
            DocumentDeserializationError: If the document does not validate
                or nests too deeply to rebuild
            BitscopeError: Any entity error raised while rebuilding
        """
        try:
            if not isinstance(document, ScopeDocument):
                document = self._validate(document)
            scope = Scope(document.name)
            self._populate(scope, document)
        except RecursionError as e:
            logger.debug("Rejected scope document: nesting too deep")
            raise DocumentDeserializationError(
                "Scope document nests too deeply to read",
                format_name=self.FORMAT_NAME,
                original_error=e,
            ) from e
        return scope

    def _validate(self, document: Mapping[str, Any]) -> ScopeDocument:
        try:
            return ScopeDocument.model_validate(document)
        except PydanticValidationError as e:
            logger.debug(f"Rejected malformed scope document: {e.error_count()} errors")
            raise DocumentDeserializationError(
                "Scope document failed validation",
                format_name=self.FORMAT_NAME,
                original_error=e,
                details={"errors": e.errors(include_url=False, include_context=False)},
            ) from e

    def _populate(self, scope: Scope, document: ScopeDocument) -> None:
        for item in document.permissions:
            scope.add_permission_explicit(item.name, item.shift)
            if item.granted:
                scope.require_permission(item.name).grant()
        for child_document in document.children:
            self._populate(scope.add_scope(child_document.name), child_document)

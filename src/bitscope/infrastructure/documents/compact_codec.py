"""Compact tuple document codec.

Packs each scope as ``[name, value, names_by_shift, children]`` where
``names_by_shift[i]`` is the permission at shift ``i`` (``None`` for an
unused gap) and ``children`` is a list of the same four-item form. Grant
state travels in ``value``; names travel alongside so no schema is needed.
"""

import logging
from typing import Any, List, Optional

from ...core.entities import Scope
from ...core.exceptions import DocumentDeserializationError
from ...codec.packing import as_u64

logger = logging.getLogger(__name__)

CompactScope = List[Any]


class CompactTupleCodec:
    """Scope <-> compact nested list codec."""

    FORMAT_NAME = "compact"

    def get_format_name(self) -> str:
        return self.FORMAT_NAME

    def encode(self, scope: Scope) -> CompactScope:
        names_by_shift: List[Optional[str]] = [None] * scope.next_shift
        for permission in scope:
            names_by_shift[permission.shift] = permission.name
        return [
            scope.name,
            as_u64(scope),
            names_by_shift,
            [self.encode(child) for child in scope.children.values()],
        ]

    def decode(self, document: CompactScope) -> Scope:
        """Rebuild a scope tree from its compact form.

        Error paths locate the offending node by position: ``$`` is the root
        and ``$[i]`` its i-th child, so nodes whose name cannot be read are
        still reported.

        Raises:
            DocumentDeserializationError: If the nesting or value is malformed
            BitscopeError: Any entity error raised while rebuilding
        """
        name = self._unpack(document, "$")[0]
        scope = Scope(name)
        try:
            self._populate(scope, document, "$")
        except RecursionError as e:
            logger.debug(f"Rejected compact document for '{name}': nesting too deep")
            raise DocumentDeserializationError(
                f"Compact scope '{name}' nests too deeply to read",
                format_name=self.FORMAT_NAME,
                original_error=e,
            ) from e
        return scope

    def _populate(self, scope: Scope, document: CompactScope, path: str) -> None:
        _, value, names_by_shift, children = self._unpack(document, path)

        declared = 0
        for shift, permission_name in enumerate(names_by_shift):
            if permission_name is None:
                continue
            scope.add_permission_explicit(permission_name, shift)
            declared |= 1 << shift

        if value & ~declared:
            raise self._malformed(path, f"value {value} sets bits with no named permission")
        for permission in scope:
            if value & permission.mask:
                permission.grant()

        for index, child_document in enumerate(children):
            child_path = f"{path}[{index}]"
            child_name = self._unpack(child_document, child_path)[0]
            self._populate(scope.add_scope(child_name), child_document, child_path)

    def _unpack(self, document: Any, path: str):
        if not isinstance(document, (list, tuple)) or len(document) != 4:
            raise self._malformed(path, "expected a [name, value, names, children] list")
        name, value, names_by_shift, children = document
        if not isinstance(name, str):
            raise self._malformed(path, "scope name must be a string")
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise self._malformed(path, "value must be a non-negative integer")
        if not isinstance(names_by_shift, (list, tuple)):
            raise self._malformed(path, "permission names must be a list")
        if not isinstance(children, (list, tuple)):
            raise self._malformed(path, "children must be a list")
        return name, value, names_by_shift, children

    def _malformed(self, path: str, reason: str) -> DocumentDeserializationError:
        logger.debug(f"Rejected compact document at '{path}': {reason}")
        return DocumentDeserializationError(
            f"Malformed compact scope at '{path}': {reason}",
            format_name=self.FORMAT_NAME,
            details={"path": path},
        )

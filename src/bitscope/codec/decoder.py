"""Decoding of numeric forms back into scope trees.

A bare integer decodes a single scope with no children. A
``(value, {child: form})`` pair decodes a tree; its set of child names must
match the schema exactly at every level.
"""

import logging
from typing import Any, Mapping, Optional, Tuple

from ..core.entities import Scope
from ..core.exceptions import SchemaMismatchError
from ..core.value_objects import U64_MAX
from .schema import ScopeSchema

logger = logging.getLogger(__name__)


def decode(schema: ScopeSchema, numeric_form: Any) -> Scope:
    """Rebuild a scope tree from its numeric form.

    Args:
        schema: Agreed names, shifts and tree shape
        numeric_form: ``int`` or ``(int, {child_name: form})``

    Returns:
        A new scope tree whose grant states follow the encoded bits

    Raises:
        ShiftOverflowError: If the schema declares a shift outside 0..51
        SchemaMismatchError: If the form's shape or bits do not fit the schema
    """
    scope = Scope(schema.name)
    _decode_into(scope, schema, numeric_form, schema.name)
    return scope


def _decode_into(scope: Scope, schema: ScopeSchema, numeric_form: Any, path: str) -> None:
    value, children_form = _split_form(numeric_form, path)

    # Building through the entity enforces shift range and uniqueness.
    for spec in schema.permissions:
        scope.add_permission_explicit(spec.name, spec.shift)

    if not 0 <= value <= U64_MAX:
        raise SchemaMismatchError(
            f"Value {value} at '{path}' is not an unsigned 64-bit integer",
            path,
            value=value,
        )
    undeclared = value & ~schema.mask
    if undeclared:
        raise SchemaMismatchError(
            f"Value at '{path}' sets bits the schema does not declare: {undeclared:#x}",
            path,
            value=value,
            undeclared_bits=undeclared,
        )

    for permission in scope:
        if value & permission.mask:
            permission.grant()

    expected = set(schema.children)
    received = set(children_form or {})
    if expected != received:
        raise SchemaMismatchError(
            f"Child scopes at '{path}' do not match the schema",
            path,
            missing=sorted(expected - received),
            unexpected=sorted(received - expected),
        )

    for name, child_schema in schema.children.items():
        if child_schema.name != name:
            raise SchemaMismatchError(
                f"Child schema at '{path}.{name}' is named '{child_schema.name}'",
                f"{path}.{name}",
                schema_name=child_schema.name,
            )
        _decode_into(scope.add_scope(name), child_schema, children_form[name], f"{path}.{name}")

    logger.debug(f"Decoded scope '{path}' with value {value} ({len(scope.granted())} granted)")


def _split_form(numeric_form: Any, path: str) -> Tuple[int, Optional[Mapping[str, Any]]]:
    if _is_int(numeric_form):
        return numeric_form, None

    if isinstance(numeric_form, (tuple, list)) and len(numeric_form) == 2:
        value, children_form = numeric_form
        if _is_int(value) and isinstance(children_form, Mapping):
            return value, children_form

    raise SchemaMismatchError(
        f"Form at '{path}' must be an int or an (int, mapping) pair, got {type(numeric_form).__name__}",
        path,
        form_type=type(numeric_form).__name__,
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)

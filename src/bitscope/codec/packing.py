"""Packing of scopes into numeric and tuple forms.

``as_u64`` folds a single scope's own permissions into its permission
number. ``as_tuple`` captures a whole tree as ``(value, {child: tuple})``,
which is the transferable form once more than 52 permissions are needed.
"""

from typing import Dict, Tuple

from ..core.entities import Scope

ScopeTuple = Tuple[int, Dict[str, "ScopeTuple"]]


def as_u64(scope: Scope) -> int:
    """OR of the values of the scope's own permissions; children excluded."""
    value = 0
    for permission in scope:
        value |= permission.value()
    return value


def as_tuple(scope: Scope) -> ScopeTuple:
    """Recursive ``(value, {child_name: as_tuple(child)})`` form of a tree."""
    return (
        as_u64(scope),
        {name: as_tuple(child) for name, child in scope.children.items()},
    )

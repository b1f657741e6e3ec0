"""Out-of-band schema describing a scope tree.

The numeric forms carry only bits. To read them back, both sides must agree
on each scope's permission names and shifts and on the shape of the child
tree. A schema holds exactly that agreement and no grant state.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple

from ..core.entities import Scope


@dataclass(frozen=True)
class PermissionSpec:
    """Name and shift of one permission in a schema."""

    name: str
    shift: int


@dataclass(frozen=True)
class ScopeSchema:
    """Names, shifts and child shape of one scope, recursively.

    Shifts are not range-checked here; decoding rebuilds scopes through the
    entities, which reject out-of-range or conflicting entries. Children are
    held in a read-only mapping, so schemas can be hashed and shared.
    """

    name: str
    permissions: Tuple[PermissionSpec, ...] = ()
    children: Mapping[str, "ScopeSchema"] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "permissions", tuple(self.permissions))
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def __hash__(self):
        return hash((self.name, self.permissions, tuple(self.children.items())))

    @classmethod
    def from_names(
        cls,
        name: str,
        permission_names: Iterable[str] = (),
        children: Optional[Iterable["ScopeSchema"]] = None,
    ) -> "ScopeSchema":
        """Build a schema whose permissions take shifts 0, 1, 2... in order.

        This mirrors what ``Scope.add_permission`` allocates for the same
        sequence of names.
        """
        return cls(
            name=name,
            permissions=tuple(
                PermissionSpec(permission_name, shift)
                for shift, permission_name in enumerate(permission_names)
            ),
            children={child.name: child for child in children or ()},
        )

    @property
    def mask(self) -> int:
        """Every bit this schema declares for its own scope."""
        mask = 0
        for spec in self.permissions:
            mask |= 1 << spec.shift
        return mask

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "permissions": [{"name": p.name, "shift": p.shift} for p in self.permissions],
            "children": {name: child.to_dict() for name, child in self.children.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScopeSchema":
        return cls(
            name=data["name"],
            permissions=tuple(
                PermissionSpec(p["name"], p["shift"]) for p in data.get("permissions", ())
            ),
            children={
                name: cls.from_dict(child) for name, child in data.get("children", {}).items()
            },
        )


def schema_of(scope: Scope) -> ScopeSchema:
    """Extract the schema of a scope tree, dropping grant state."""
    return ScopeSchema(
        name=scope.name,
        permissions=tuple(PermissionSpec(p.name, p.shift) for p in scope),
        children={name: schema_of(child) for name, child in scope.children.items()},
    )

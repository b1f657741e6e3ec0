"""Scope domain entity.

A scope is a named container of at most 52 permissions plus any number of
child scopes. Every scope owns an independent bit space: its permission
number reflects only its own permissions, and each child allocates shifts
from its own counter starting at zero.

Scopes are not internally synchronized. Callers sharing one across threads
must serialize mutations; allocation and the uniqueness checks are not
atomic with respect to concurrent writers.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from ..exceptions import (
    AlreadyGrantedError,
    AlreadyRevokedError,
    DuplicatePermissionError,
    DuplicateScopeError,
    ScopeFullError,
    ShiftConflictError,
    UnknownPermissionError,
    UnknownScopeError,
)
from ..value_objects import MAX_PERMISSIONS, validate_name, validate_shift
from .permission import Permission

logger = logging.getLogger(__name__)


class Scope:
    """Named permission container with a monotonic shift allocator."""

    def __init__(self, name: str):
        self.name = validate_name(name, "scope")
        self._permissions: Dict[str, Permission] = {}
        self._children: Dict[str, "Scope"] = {}
        self._next_shift = 0

    # Read-only views

    @property
    def permissions(self) -> Dict[str, Permission]:
        """Permissions by name, in insertion order."""
        return dict(self._permissions)

    @property
    def children(self) -> Dict[str, "Scope"]:
        """Child scopes by name, in insertion order."""
        return dict(self._children)

    @property
    def next_shift(self) -> int:
        return self._next_shift

    def __len__(self) -> int:
        return len(self._permissions)

    def __iter__(self) -> Iterator[Permission]:
        return iter(self._permissions.values())

    def __contains__(self, name: object) -> bool:
        return name in self._permissions

    # Allocation

    def add_permission(self, name: str) -> "Scope":
        """Add a permission at the next free shift.

        Returns:
            This scope, so additions can be chained

        Raises:
            InvalidNameError: If the name is empty
            DuplicatePermissionError: If the name is already defined here
            ScopeFullError: If the allocator has reached the slot limit
        """
        validate_name(name)
        if name in self._permissions:
            logger.debug(f"Rejected duplicate permission '{name}' in scope '{self.name}'")
            raise DuplicatePermissionError(self.name, name)
        if self._next_shift >= MAX_PERMISSIONS:
            logger.debug(f"Scope '{self.name}' is full, cannot allocate '{name}'")
            raise ScopeFullError(self.name, name, MAX_PERMISSIONS)

        permission = Permission(name, self._next_shift)
        self._permissions[name] = permission
        self._next_shift += 1
        logger.debug(f"Allocated shift {permission.shift} for '{name}' in scope '{self.name}'")
        return self

    def add_permission_explicit(self, name: str, shift: int) -> "Scope":
        """Add a permission at a caller-chosen shift.

        A free shift below the allocator counter fills a gap and leaves the
        counter alone. A shift at or past the counter moves the counter to
        ``shift + 1`` so implicit allocation never lands on it.

        Returns:
            This scope, so additions can be chained

        Raises:
            InvalidNameError: If the name is empty
            ShiftOverflowError: If the shift is outside 0..51
            DuplicatePermissionError: If the name is already defined here
            ShiftConflictError: If another permission already holds the shift
        """
        validate_name(name)
        validate_shift(name, shift)
        if name in self._permissions:
            logger.debug(f"Rejected duplicate permission '{name}' in scope '{self.name}'")
            raise DuplicatePermissionError(self.name, name)
        holder = self._holder_of(shift)
        if holder is not None:
            logger.debug(f"Rejected shift {shift} for '{name}' in scope '{self.name}': held by '{holder.name}'")
            raise ShiftConflictError(self.name, name, shift, holder.name)

        self._permissions[name] = Permission(name, shift)
        if shift >= self._next_shift:
            self._next_shift = shift + 1
        logger.debug(f"Placed '{name}' at explicit shift {shift} in scope '{self.name}'")
        return self

    def add_scope(self, name: str) -> "Scope":
        """Add an empty child scope and return it.

        Raises:
            InvalidNameError: If the name is empty
            DuplicateScopeError: If a child with this name already exists
        """
        validate_name(name, "scope")
        if name in self._children:
            logger.debug(f"Rejected duplicate child scope '{name}' in scope '{self.name}'")
            raise DuplicateScopeError(self.name, name)
        child = Scope(name)
        self._children[name] = child
        logger.debug(f"Added child scope '{name}' to scope '{self.name}'")
        return child

    def _holder_of(self, shift: int) -> Optional[Permission]:
        for permission in self._permissions.values():
            if permission.shift == shift:
                return permission
        return None

    # Lookup

    def permission(self, name: str) -> Optional[Permission]:
        return self._permissions.get(name)

    def scope(self, name: str) -> Optional["Scope"]:
        return self._children.get(name)

    def require_permission(self, name: str) -> Permission:
        """Look up a permission that must exist.

        Raises:
            UnknownPermissionError: If no permission has this name
        """
        permission = self._permissions.get(name)
        if permission is None:
            raise UnknownPermissionError(self.name, name)
        return permission

    def require_scope(self, name: str) -> "Scope":
        """Look up a child scope that must exist.

        Raises:
            UnknownScopeError: If no child scope has this name
        """
        child = self._children.get(name)
        if child is None:
            raise UnknownScopeError(self.name, name)
        return child

    # State transitions

    def grant(self, *names: str) -> "Scope":
        """Grant several local permissions; nothing changes if any would fail."""
        for permission in self._resolve_transition(names, granting=True):
            permission.grant()
        return self

    def revoke(self, *names: str) -> "Scope":
        """Revoke several local permissions; nothing changes if any would fail."""
        for permission in self._resolve_transition(names, granting=False):
            permission.revoke()
        return self

    def _resolve_transition(self, names: Tuple[str, ...], granting: bool) -> List[Permission]:
        # A name repeated in one call is applied once.
        resolved: List[Permission] = []
        for name in dict.fromkeys(names):
            permission = self.require_permission(name)
            if permission.is_granted == granting:
                raise AlreadyGrantedError(name) if granting else AlreadyRevokedError(name)
            resolved.append(permission)
        return resolved

    def granted(self) -> List[str]:
        """Names of granted local permissions, in insertion order."""
        return [p.name for p in self._permissions.values() if p.is_granted]

    # Encoding

    def as_u64(self) -> int:
        from ...codec.packing import as_u64
        return as_u64(self)

    def as_tuple(self) -> tuple:
        from ...codec.packing import as_tuple
        return as_tuple(self)

    def __repr__(self) -> str:
        return (
            f"Scope({self.name}, permissions={len(self._permissions)}, "
            f"children={list(self._children)}, next_shift={self._next_shift})"
        )

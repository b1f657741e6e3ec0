"""Scope exceptions.

Raised by the Scope entity for allocation, naming and lookup failures.
"""

from .base import BitscopeError


class ScopeError(BitscopeError):
    """Base class for scope-related errors."""

    def __init__(self, message: str, scope: str, **details):
        super().__init__(message, details={"scope": scope, **details})
        self.scope = scope


class ScopeFullError(ScopeError):
    """Raised when implicit allocation would exceed the permission limit."""

    def __init__(self, scope: str, name: str, limit: int):
        super().__init__(
            f"Scope '{scope}' cannot allocate permission '{name}': all {limit} slots are used",
            scope,
            name=name,
            limit=limit,
        )
        self.name = name
        self.limit = limit


class DuplicatePermissionError(ScopeError):
    """Raised when a permission name already exists in the scope."""

    def __init__(self, scope: str, name: str):
        super().__init__(
            f"Permission '{name}' is already defined in scope '{scope}'",
            scope,
            name=name,
        )
        self.name = name


class DuplicateScopeError(ScopeError):
    """Raised when a child scope name already exists under the same parent."""

    def __init__(self, scope: str, name: str):
        super().__init__(
            f"Child scope '{name}' is already defined in scope '{scope}'",
            scope,
            name=name,
        )
        self.name = name


class ShiftConflictError(ScopeError):
    """Raised when an explicit shift is already held by another permission."""

    def __init__(self, scope: str, name: str, shift: int, holder: str):
        super().__init__(
            f"Shift {shift} requested for permission '{name}' is already used by '{holder}' in scope '{scope}'",
            scope,
            name=name,
            shift=shift,
            holder=holder,
        )
        self.name = name
        self.shift = shift
        self.holder = holder


class UnknownPermissionError(ScopeError):
    """Raised when a required permission is not defined in the scope."""

    def __init__(self, scope: str, name: str):
        super().__init__(
            f"Permission '{name}' is not defined in scope '{scope}'",
            scope,
            name=name,
        )
        self.name = name


class UnknownScopeError(ScopeError):
    """Raised when a required child scope is not defined under the scope."""

    def __init__(self, scope: str, name: str):
        super().__init__(
            f"Child scope '{name}' is not defined in scope '{scope}'",
            scope,
            name=name,
        )
        self.name = name

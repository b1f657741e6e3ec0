"""Value objects and bit space limits."""

from .grant_state import GrantState
from .bit_space import (
    MAX_SHIFT,
    MAX_PERMISSIONS,
    MAX_SCOPE_VALUE,
    U64_MAX,
    validate_name,
    validate_shift,
)

__all__ = [
    "GrantState",
    "MAX_SHIFT",
    "MAX_PERMISSIONS",
    "MAX_SCOPE_VALUE",
    "U64_MAX",
    "validate_name",
    "validate_shift",
]

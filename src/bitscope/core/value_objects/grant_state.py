"""Grant state of a permission."""

from enum import Enum


class GrantState(str, Enum):
    """Two-state grant flag carried by every permission."""
    REVOKED = "revoked"
    GRANTED = "granted"

    @classmethod
    def from_bool(cls, granted: bool) -> "GrantState":
        return cls.GRANTED if granted else cls.REVOKED

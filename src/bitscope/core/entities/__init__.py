"""Permission and scope entities."""

from .permission import Permission
from .scope import Scope

__all__ = [
    "Permission",
    "Scope",
]

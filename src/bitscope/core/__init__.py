"""Core permission and scope model.

- entities/: Permission and Scope
- value_objects/: grant state and bit space limits
- exceptions/: error hierarchy
- protocols/: document codec contract
"""

from .entities import Permission, Scope
from .value_objects import GrantState, MAX_SHIFT, MAX_PERMISSIONS
from .protocols import DocumentCodec

__all__ = [
    "Permission",
    "Scope",
    "GrantState",
    "MAX_SHIFT",
    "MAX_PERMISSIONS",
    "DocumentCodec",
]

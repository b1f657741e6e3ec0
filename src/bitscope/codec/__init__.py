"""Numeric codec for scope trees.

- packing: scope -> permission number / recursive tuple
- schema: out-of-band names, shifts and tree shape
- decoder: numeric form + schema -> scope tree
"""

from .packing import ScopeTuple, as_u64, as_tuple
from .schema import PermissionSpec, ScopeSchema, schema_of
from .decoder import decode

__all__ = [
    "ScopeTuple",
    "as_u64",
    "as_tuple",
    "PermissionSpec",
    "ScopeSchema",
    "schema_of",
    "decode",
]

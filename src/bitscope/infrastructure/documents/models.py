"""Structured document models.

Pydantic models mirroring the scope tree attribute for attribute. Range and
uniqueness rules are left to the entities so a document fails with the same
errors as direct construction.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt


class PermissionDocument(BaseModel):
    """One permission: name, bit position and grant state."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    shift: StrictInt
    granted: StrictBool = False


class ScopeDocument(BaseModel):
    """One scope with its permissions and child scopes, recursively."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    permissions: List[PermissionDocument] = Field(default_factory=list)
    children: List["ScopeDocument"] = Field(default_factory=list)


ScopeDocument.model_rebuild()

"""Byte-level serializers for scope documents."""

from .json_serializer import JSONScopeSerializer

__all__ = [
    "JSONScopeSerializer",
]

"""Core protocols."""

from .document_codec import DocumentCodec

__all__ = [
    "DocumentCodec",
]

"""JSON scope serializer.

Writes any document codec's output as UTF-8 JSON bytes and reads it back.
The structured codec is used unless another one is supplied.
"""

import json
import logging
from typing import Optional

from pydantic import BaseModel

from ...config.settings import get_settings
from ...core.entities import Scope
from ...core.exceptions import DocumentDeserializationError, DocumentSerializationError
from ...core.protocols import DocumentCodec
from ..documents.structured_codec import StructuredDocumentCodec

logger = logging.getLogger(__name__)


class JSONScopeSerializer:
    """JSON serializer for scope trees on top of a DocumentCodec.

    Formatting defaults come from BitscopeSettings (``json_indent`` and
    ``json_sort_keys``) and can be overridden per instance.
    """

    def __init__(
        self,
        codec: Optional[DocumentCodec] = None,
        indent: Optional[int] = None,
        sort_keys: Optional[bool] = None,
    ):
        settings = get_settings()
        self._codec = codec or StructuredDocumentCodec()
        self._indent = indent if indent is not None else settings.json_indent
        self._sort_keys = sort_keys if sort_keys is not None else settings.json_sort_keys
        self._separators = (",", ":") if self._indent is None else None

    @property
    def codec(self) -> DocumentCodec:
        return self._codec

    def get_format_name(self) -> str:
        return f"json+{self._codec.get_format_name()}"

    def get_content_type(self) -> str:
        return "application/json"

    def serialize(self, scope: Scope) -> bytes:
        """Serialize a scope tree to JSON bytes.

        Raises:
            DocumentSerializationError: If the document cannot be written
        """
        document = self._codec.encode(scope)
        if isinstance(document, BaseModel):
            document = document.model_dump(mode="json")
        try:
            payload = json.dumps(
                document,
                indent=self._indent,
                separators=self._separators,
                sort_keys=self._sort_keys,
                ensure_ascii=False,
            )
        except (TypeError, ValueError) as e:
            raise DocumentSerializationError(
                f"Failed to write scope '{scope.name}' as JSON",
                format_name=self.get_format_name(),
                original_error=e,
            ) from e
        data = payload.encode("utf-8")
        logger.debug(f"Serialized scope '{scope.name}' to {len(data)} bytes ({self.get_format_name()})")
        return data

    def deserialize(self, data: bytes) -> Scope:
        """Read a scope tree back from JSON bytes.

        Raises:
            DocumentDeserializationError: If the bytes are not valid JSON or
                the codec rejects the document
        """
        try:
            document = json.loads(data)
        except RecursionError as e:
            raise DocumentDeserializationError(
                "Payload nests too deeply to read",
                format_name=self.get_format_name(),
                original_error=e,
            ) from e
        except (UnicodeDecodeError, ValueError) as e:
            raise DocumentDeserializationError(
                "Payload is not valid UTF-8 JSON",
                format_name=self.get_format_name(),
                original_error=e,
            ) from e
        return self._codec.decode(document)

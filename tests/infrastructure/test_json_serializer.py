"""Tests for the JSON scope serializer."""

import json

import pytest

from bitscope.core.exceptions import DocumentDeserializationError, DocumentSerializationError
from bitscope.infrastructure.documents import CompactTupleCodec
from bitscope.infrastructure.serializers import JSONScopeSerializer


class TestJSONScopeSerializer:
    """Test cases for JSON bytes on top of document codecs."""

    def test_defaults(self):
        serializer = JSONScopeSerializer()

        assert serializer.get_format_name() == "json+structured"
        assert serializer.get_content_type() == "application/json"

    def test_structured_round_trip(self, user_tree):
        serializer = JSONScopeSerializer()

        data = serializer.serialize(user_tree)
        rebuilt = serializer.deserialize(data)

        assert isinstance(data, bytes)
        assert rebuilt.as_tuple() == user_tree.as_tuple()

    def test_compact_output(self, rwx_scope):
        rwx_scope.grant("READ", "EXECUTE")
        serializer = JSONScopeSerializer(codec=CompactTupleCodec())

        data = serializer.serialize(rwx_scope)

        assert data == b'["TEST_SCOPE",5,["READ","WRITE","EXECUTE"],[]]'
        assert serializer.deserialize(data).granted() == ["READ", "EXECUTE"]

    def test_settings_control_formatting(self, monkeypatch, rwx_scope):
        monkeypatch.setenv("BITSCOPE_JSON_INDENT", "2")
        monkeypatch.setenv("BITSCOPE_JSON_SORT_KEYS", "true")

        data = JSONScopeSerializer().serialize(rwx_scope)

        assert data.startswith(b'{\n  "children"')
        assert json.loads(data)["name"] == "TEST_SCOPE"

    def test_explicit_arguments_override_settings(self, monkeypatch, rwx_scope):
        monkeypatch.setenv("BITSCOPE_JSON_INDENT", "2")

        data = JSONScopeSerializer(indent=0).serialize(rwx_scope)

        assert data.startswith(b'{\n"name"')

    @pytest.mark.parametrize("data", [b"not json", b"\x80abc", b"{"])
    def test_invalid_payload(self, data):
        with pytest.raises(DocumentDeserializationError, match="not valid UTF-8 JSON"):
            JSONScopeSerializer().deserialize(data)

    def test_valid_json_invalid_document(self):
        with pytest.raises(DocumentDeserializationError, match="failed validation"):
            JSONScopeSerializer().deserialize(b'{"permissions": []}')

    def test_unserializable_document(self, rwx_scope):
        class SetCodec(CompactTupleCodec):
            def encode(self, scope):
                return {scope.name: {1, 2}}

        with pytest.raises(DocumentSerializationError, match="Failed to write scope 'TEST_SCOPE'"):
            JSONScopeSerializer(codec=SetCodec()).serialize(rwx_scope)

    @pytest.mark.parametrize("data", [b"[" * 100000, b'{"a":' * 100000])
    def test_deeply_nested_payload(self, data):
        with pytest.raises(DocumentDeserializationError, match="nests too deeply") as exc_info:
            JSONScopeSerializer().deserialize(data)

        assert exc_info.value.details["original_error"]["type"] == "RecursionError"

    def test_deeply_nested_compact_payload(self):
        data = b'["L",0,[],[' * 3000 + b'["L",0,[],[]]' + b"]]" * 3000

        with pytest.raises(DocumentDeserializationError, match="nests too deeply"):
            JSONScopeSerializer(codec=CompactTupleCodec()).deserialize(data)

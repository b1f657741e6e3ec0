"""Tests for the structured document codec."""

import pytest

from bitscope.core.entities import Scope
from bitscope.core.exceptions import (
    DocumentDeserializationError,
    DuplicateScopeError,
    ShiftOverflowError,
)
from bitscope.core.protocols import DocumentCodec
from bitscope.infrastructure.documents import (
    PermissionDocument,
    ScopeDocument,
    StructuredDocumentCodec,
)


@pytest.fixture
def codec():
    return StructuredDocumentCodec()


class TestStructuredEncode:
    """Test cases for encoding scopes to documents."""

    def test_implements_protocol(self, codec):
        assert isinstance(codec, DocumentCodec)
        assert codec.get_format_name() == "structured"

    def test_encode_tree(self, codec, user_tree):
        document = codec.encode(user_tree)

        assert isinstance(document, ScopeDocument)
        assert document.name == "USER"
        assert document.permissions[0] == PermissionDocument(name="CREATE", shift=0, granted=True)
        assert document.permissions[2] == PermissionDocument(name="UPDATE", shift=2, granted=False)
        assert [c.name for c in document.children] == ["CHILD_SCOPE"]
        assert document.children[0].children[0].name == "AUDIT"


class TestStructuredDecode:
    """Test cases for rebuilding scopes from documents."""

    def test_round_trip_preserves_everything(self, codec, user_tree):
        rebuilt = codec.decode(codec.encode(user_tree))

        assert rebuilt.as_tuple() == user_tree.as_tuple()
        assert codec.encode(rebuilt) == codec.encode(user_tree)

    def test_explicit_gaps_survive(self, codec):
        scope = Scope("GAPPY").add_permission_explicit("HIGH", 30).add_permission_explicit("LOW", 2)
        scope.grant("HIGH")

        rebuilt = codec.decode(codec.encode(scope))

        assert rebuilt.permission("HIGH").shift == 30
        assert rebuilt.permission("LOW").shift == 2
        assert rebuilt.next_shift == 31
        assert rebuilt.as_u64() == 1 << 30

    def test_decode_plain_dict(self, codec):
        scope = codec.decode({
            "name": "TEST_SCOPE",
            "permissions": [
                {"name": "READ", "shift": 0, "granted": True},
                {"name": "WRITE", "shift": 1},
            ],
            "children": [{"name": "CHILD"}],
        })

        assert scope.as_u64() == 1
        assert scope.scope("CHILD") is not None

    @pytest.mark.parametrize(
        "document",
        [
            {"permissions": []},
            {"name": "S", "permissions": [{"name": "READ"}]},
            {"name": "S", "permissions": [{"name": "READ", "shift": "0"}]},
            {"name": "S", "unknown": 1},
            {"name": ""},
        ],
    )
    def test_malformed_documents(self, codec, document):
        with pytest.raises(DocumentDeserializationError, match="failed validation") as exc_info:
            codec.decode(document)

        assert exc_info.value.details["errors"]

    def test_entity_rules_apply(self, codec):
        with pytest.raises(ShiftOverflowError):
            codec.decode({"name": "S", "permissions": [{"name": "READ", "shift": 60}]})

        with pytest.raises(DuplicateScopeError):
            codec.decode({"name": "S", "children": [{"name": "C"}, {"name": "C"}]})

    def test_deeply_nested_document_is_wrapped(self, codec):
        document = ScopeDocument(name="L0")
        for depth in range(1, 5000):
            document = ScopeDocument(name=f"L{depth}", children=[document])

        with pytest.raises(DocumentDeserializationError, match="nests too deeply"):
            codec.decode(document)

    def test_deeply_nested_dict_is_rejected(self, codec):
        document = {"name": "L0"}
        for depth in range(1, 5000):
            document = {"name": f"L{depth}", "children": [document]}

        with pytest.raises(DocumentDeserializationError):
            codec.decode(document)

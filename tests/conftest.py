"""Pytest configuration and fixtures for bitscope tests."""

import pytest

from bitscope.config.settings import reset_settings
from bitscope.core.entities import Scope
from bitscope.core.value_objects import MAX_PERMISSIONS


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Isolate every test from cached settings and stray BITSCOPE_ variables."""
    for key in ("LOG_LEVEL", "LOG_VERBOSITY", "LOG_FORMAT", "JSON_INDENT", "JSON_SORT_KEYS"):
        monkeypatch.delenv(f"BITSCOPE_{key}", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def rwx_scope():
    """TEST_SCOPE with READ, WRITE and EXECUTE at shifts 0, 1, 2."""
    return (
        Scope("TEST_SCOPE")
        .add_permission("READ")
        .add_permission("WRITE")
        .add_permission("EXECUTE")
    )


@pytest.fixture
def user_tree():
    """USER scope with CRUD+EXECUTE, some granted, and one child scope."""
    scope = Scope("USER")
    for name in ("CREATE", "READ", "UPDATE", "DELETE", "EXECUTE"):
        scope.add_permission(name)
    scope.grant("CREATE", "READ", "EXECUTE")

    child = scope.add_scope("CHILD_SCOPE")
    child.add_permission("CREATE").add_permission("ARCHIVE")
    child.grant("ARCHIVE")

    grandchild = child.add_scope("AUDIT")
    grandchild.add_permission("VIEW")
    return scope


@pytest.fixture
def full_scope():
    """Scope whose allocator has used every slot."""
    scope = Scope("FULL")
    for i in range(MAX_PERMISSIONS):
        scope.add_permission(f"PERMISSION_{i}")
    return scope

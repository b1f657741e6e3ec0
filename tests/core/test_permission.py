"""Tests for the Permission entity."""

import pytest

from bitscope.core.entities import Permission, Scope
from bitscope.core.exceptions import (
    AlreadyGrantedError,
    AlreadyRevokedError,
    InvalidNameError,
    ShiftOverflowError,
)
from bitscope.core.value_objects import GrantState, MAX_SCOPE_VALUE, MAX_SHIFT


class TestPermissionConstruction:
    """Test cases for creating permissions."""

    @pytest.mark.parametrize("shift", range(0, MAX_SHIFT + 1))
    def test_valid_shifts(self, shift):
        """Every shift in 0..51 is accepted and starts revoked."""
        permission = Permission("TEST_PERMISSION", shift)

        assert permission.shift == shift
        assert permission.state is GrantState.REVOKED
        assert permission.value() == 0
        assert permission.mask == 1 << shift

    @pytest.mark.parametrize("shift", range(52, 64))
    def test_shift_overflow(self, shift):
        """Shifts past 51 are rejected even though they fit in 64 bits."""
        with pytest.raises(ShiftOverflowError, match=f"Shift {shift}") as exc_info:
            Permission("TEST_PERMISSION", shift)

        assert exc_info.value.shift == shift
        assert exc_info.value.max_shift == 51
        assert exc_info.value.details["name"] == "TEST_PERMISSION"

    @pytest.mark.parametrize("shift", [-1, 64, 1.0, "3", True])
    def test_non_integer_or_negative_shift(self, shift):
        with pytest.raises(ShiftOverflowError):
            Permission("TEST_PERMISSION", shift)

    @pytest.mark.parametrize("name", ["", None, 7])
    def test_invalid_name(self, name):
        with pytest.raises(InvalidNameError):
            Permission(name, 0)

    def test_max_value_is_javascript_safe(self):
        """The highest bit stays below Number.MAX_SAFE_INTEGER."""
        permission = Permission("TOP", MAX_SHIFT).grant()

        assert permission.value() == 1 << 51
        assert permission.value() < 9007199254740991

    @pytest.mark.parametrize("field, value", [("shift", 60), ("shift", 0), ("name", "OTHER")])
    def test_name_and_shift_are_read_only(self, field, value):
        """A constructed permission keeps its position and name."""
        permission = Permission("READ", 2).grant()

        with pytest.raises(AttributeError, match=f"cannot reassign '{field}'"):
            setattr(permission, field, value)

        assert (permission.name, permission.shift) == ("READ", 2)

    def test_reassignment_cannot_widen_scope_value(self):
        scope = Scope("TEST_SCOPE").add_permission("READ").grant("READ")

        with pytest.raises(AttributeError):
            scope.require_permission("READ").shift = 60

        assert scope.as_u64() == 1
        assert scope.as_u64() <= MAX_SCOPE_VALUE

    def test_state_stays_assignable(self):
        permission = Permission("READ", 2)
        permission.state = GrantState.GRANTED

        assert permission.is_granted


class TestPermissionStateMachine:
    """Test cases for grant/revoke transitions."""

    def test_grant_sets_value(self):
        permission = Permission("WRITE", 5)

        assert permission.grant() is permission
        assert permission.is_granted
        assert permission.value() == 1 << 5

    def test_grant_then_revoke_returns_to_zero(self):
        permission = Permission("WRITE", 5)

        permission.grant()
        permission.revoke()

        assert permission.state is GrantState.REVOKED
        assert permission.value() == 0

    def test_grant_twice_fails_without_change(self):
        permission = Permission("WRITE", 3).grant()

        with pytest.raises(AlreadyGrantedError, match="already granted"):
            permission.grant()

        assert permission.is_granted
        assert permission.value() == 8

    def test_revoke_fresh_permission_fails_without_change(self):
        permission = Permission("WRITE", 3)

        with pytest.raises(AlreadyRevokedError, match="already revoked"):
            permission.revoke()

        assert permission.value() == 0

    def test_constructed_with_granted_state(self):
        permission = Permission("READ", 0, state="granted")

        assert permission.state is GrantState.GRANTED
        assert permission.value() == 1

    def test_repr_shows_state(self):
        assert repr(Permission("READ", 2)) == "Permission(READ, shift=2, state=revoked)"


class TestGrantState:
    """Test cases for GrantState."""

    def test_from_bool(self):
        assert GrantState.from_bool(True) is GrantState.GRANTED
        assert GrantState.from_bool(False) is GrantState.REVOKED

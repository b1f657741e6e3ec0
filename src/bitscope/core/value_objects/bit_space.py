"""Bit space limits and validation helpers.

Each scope owns one 64-bit word, but only shifts 0..51 are handed out so the
largest permission number, ``(1 << 52) - 1``, stays below the 53-bit safe
integer ceiling of JavaScript-style runtimes with one bit of headroom.
"""

from typing import Any

from ..exceptions import InvalidNameError, ShiftOverflowError

MAX_SHIFT = 51
MAX_PERMISSIONS = MAX_SHIFT + 1
MAX_SCOPE_VALUE = (1 << MAX_PERMISSIONS) - 1
U64_MAX = (1 << 64) - 1


def validate_name(name: Any, kind: str = "permission") -> str:
    """Return ``name`` if it is a non-empty string.

    Raises:
        InvalidNameError: If the name is not a string or is empty
    """
    if not isinstance(name, str) or not name:
        raise InvalidNameError(name, kind)
    return name


def validate_shift(name: str, shift: Any) -> int:
    """Return ``shift`` if it lies within 0..MAX_SHIFT.

    Booleans are rejected even though they are ints.

    Raises:
        ShiftOverflowError: If the shift is not an int in range
    """
    if isinstance(shift, bool) or not isinstance(shift, int) or not 0 <= shift <= MAX_SHIFT:
        raise ShiftOverflowError(name, shift, MAX_SHIFT)
    return shift

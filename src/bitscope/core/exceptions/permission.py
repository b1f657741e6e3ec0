"""Permission exceptions.

Raised by the Permission entity for out-of-range shifts and redundant
grant/revoke transitions.
"""

from .base import BitscopeError


class PermissionError(BitscopeError):
    """Base class for permission-related errors."""
    pass


class ShiftOverflowError(PermissionError):
    """Raised when a shift falls outside the encodable 0..51 range."""

    def __init__(self, name: str, shift: int, max_shift: int):
        super().__init__(
            f"Shift {shift} for permission '{name}' is outside the safe range 0..{max_shift}",
            details={"name": name, "shift": shift, "max_shift": max_shift},
        )
        self.name = name
        self.shift = shift
        self.max_shift = max_shift


class PermissionStateError(PermissionError):
    """Base class for rejected grant/revoke transitions."""

    def __init__(self, message: str, name: str, state: str):
        super().__init__(message, details={"name": name, "state": state})
        self.name = name
        self.state = state


class AlreadyGrantedError(PermissionStateError):
    """Raised when granting a permission that is already granted."""

    def __init__(self, name: str):
        super().__init__(f"Permission '{name}' is already granted", name, "granted")


class AlreadyRevokedError(PermissionStateError):
    """Raised when revoking a permission that is already revoked."""

    def __init__(self, name: str):
        super().__init__(f"Permission '{name}' is already revoked", name, "revoked")

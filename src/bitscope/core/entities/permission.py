"""Permission domain entity.

A permission is a single named bit inside its owning scope's permission
number. Its grant state toggles strictly: granting a granted permission or
revoking a revoked one is an error rather than a no-op.
"""

import logging
from dataclasses import dataclass

from ..exceptions import AlreadyGrantedError, AlreadyRevokedError
from ..value_objects import GrantState, validate_name, validate_shift

logger = logging.getLogger(__name__)


@dataclass
class Permission:
    """Domain entity representing one positioned permission bit."""

    name: str
    shift: int
    state: GrantState = GrantState.REVOKED

    def __post_init__(self):
        """Validate name, shift range and state."""
        validate_name(self.name)
        validate_shift(self.name, self.shift)
        self.state = GrantState(self.state)

    def __setattr__(self, key, value):
        # Name and shift are fixed once set; only the grant state changes.
        if key in ("name", "shift") and key in self.__dict__:
            raise AttributeError(f"Permission '{self.name}' cannot reassign '{key}'")
        super().__setattr__(key, value)

    @property
    def is_granted(self) -> bool:
        return self.state is GrantState.GRANTED

    @property
    def mask(self) -> int:
        """Bit this permission occupies, regardless of state."""
        return 1 << self.shift

    def grant(self) -> "Permission":
        """Transition Revoked -> Granted.

        Raises:
            AlreadyGrantedError: If the permission is already granted
        """
        if self.is_granted:
            logger.debug(f"Rejected grant of already granted permission '{self.name}'")
            raise AlreadyGrantedError(self.name)
        self.state = GrantState.GRANTED
        logger.debug(f"Granted permission '{self.name}' (shift={self.shift})")
        return self

    def revoke(self) -> "Permission":
        """Transition Granted -> Revoked.

        Raises:
            AlreadyRevokedError: If the permission is already revoked
        """
        if not self.is_granted:
            logger.debug(f"Rejected revoke of already revoked permission '{self.name}'")
            raise AlreadyRevokedError(self.name)
        self.state = GrantState.REVOKED
        logger.debug(f"Revoked permission '{self.name}' (shift={self.shift})")
        return self

    def value(self) -> int:
        """Contribution to the permission number: ``1 << shift`` or ``0``."""
        return self.mask if self.is_granted else 0

    def __str__(self) -> str:
        return f"Permission({self.name})"

    def __repr__(self) -> str:
        return f"Permission({self.name}, shift={self.shift}, state={self.state.value})"

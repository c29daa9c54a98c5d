"""
midas/domain/identity.py

Identity types shared by every store operation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ADMIN_USERNAME = "admin"


class Role(str, Enum):
    """
    Visibility role of an actor.
    """

    REGULAR = "regular"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor:
    """
    Resolved identity performing an operation.

    Never persisted; rebuilt from the username on every request.
    """

    username: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

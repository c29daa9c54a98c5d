"""
midas/services/identity_service.py

Derives an actor from submitted login fields.

There is no credential store: any non-empty username/password pair is
accepted, and the role is fixed by the username alone.
"""

from __future__ import annotations

from typing import Any

from midas.domain.identity import ADMIN_USERNAME, Actor, Role


class LoginRejectedError(ValueError):
    """
    Raised when the username or password field is empty.
    """

    code = "login_rejected"

    def __init__(self, message: str = "Username and password are both required.") -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


def actor_for(username: str) -> Actor:
    """
    Build the actor for a username. Admin iff the name is "admin" in any case.
    """

    role = Role.ADMIN if username.lower() == ADMIN_USERNAME else Role.REGULAR
    return Actor(username=username, role=role)


def resolve_identity(username: str, password: str) -> Actor:
    """
    Resolve a login submission into an actor.

    Raises LoginRejectedError when either field is empty.
    """

    if not username or not password:
        raise LoginRejectedError()
    return actor_for(username)

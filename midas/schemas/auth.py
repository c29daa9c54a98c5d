"""
midas/schemas/auth.py

Request/response schemas for sign-in.
"""

from __future__ import annotations

from pydantic import BaseModel

from midas.domain.identity import Actor, Role


class LoginRequest(BaseModel):
    username: str
    password: str


class ActorResponse(BaseModel):
    """
    Resolved identity returned to the client after sign-in.
    """

    username: str
    role: Role
    is_admin: bool

    @classmethod
    def from_actor(cls, actor: Actor) -> "ActorResponse":
        return cls(username=actor.username, role=actor.role, is_admin=actor.is_admin)

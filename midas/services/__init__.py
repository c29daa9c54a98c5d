"""
midas/services package marker.
"""

from midas.services.identity_service import LoginRejectedError, actor_for, resolve_identity

__all__ = [
    "LoginRejectedError",
    "actor_for",
    "resolve_identity",
]

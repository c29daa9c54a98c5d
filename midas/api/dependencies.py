"""
midas/api/dependencies.py

Shared FastAPI dependencies for identity and store access.
"""

from __future__ import annotations

from fastapi import Query, Request

from midas.config import MidasSettings, get_midas_settings
from midas.domain.identity import Actor
from midas.repositories.product_store import ProductStore
from midas.services.identity_service import actor_for


def get_product_store(request: Request) -> ProductStore:
    """
    Return the store owned by the running application.
    """

    return request.app.state.product_store


def get_actor(
    user: str = Query(default="Anonymous", min_length=1, description="Acting username"),
) -> Actor:
    """
    Rebuild the acting identity from the ``user`` query parameter.

    The role is always derived from the username; no role is read from the client.
    """

    return actor_for(user)


def get_settings() -> MidasSettings:
    return get_midas_settings()

"""
midas/api/routers/dashboard_router.py

Dashboard summary endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from midas.api.dependencies import get_actor, get_product_store, get_settings
from midas.config import MidasSettings
from midas.domain.identity import Actor
from midas.domain.retailers import SUPPORTED_RETAILERS
from midas.repositories.product_store import ProductStore
from midas.schemas.products import DashboardResponse, ProductResponse

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
def dashboard(
    actor: Actor = Depends(get_actor),
    store: ProductStore = Depends(get_product_store),
    settings: MidasSettings = Depends(get_settings),
) -> DashboardResponse:
    """
    Summarise the acting user's view: retailers plus the latest visible products.
    """

    visible = store.list_visible(actor)
    recent = list(reversed(visible))[: settings.recent_products_limit]
    return DashboardResponse(
        username=actor.username,
        role=actor.role,
        is_admin=actor.is_admin,
        retailers=list(SUPPORTED_RETAILERS),
        recent_products=[ProductResponse.from_product(product) for product in recent],
        total_products=len(visible),
    )

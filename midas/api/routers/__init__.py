"""
midas/api/routers package marker.
"""

from midas.api.routers.auth_router import router as auth_router
from midas.api.routers.dashboard_router import router as dashboard_router
from midas.api.routers.product_router import router as product_router

__all__ = [
    "auth_router",
    "dashboard_router",
    "product_router",
]

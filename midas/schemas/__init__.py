"""
midas/schemas package marker.
"""

from midas.schemas.auth import ActorResponse, LoginRequest
from midas.schemas.products import (
    AddProductResponse,
    DashboardResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    RetailerListResponse,
)

__all__ = [
    "ActorResponse",
    "AddProductResponse",
    "DashboardResponse",
    "LoginRequest",
    "ProductCreateRequest",
    "ProductListResponse",
    "ProductResponse",
    "RetailerListResponse",
]

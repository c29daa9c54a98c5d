"""
midas/domain package marker.
"""

from midas.domain.identity import ADMIN_USERNAME, Actor, Role
from midas.domain.product import Product, ProductCandidate
from midas.domain.retailers import RETAILER_URL_FRAGMENTS, SUPPORTED_RETAILERS, is_supported_retailer

__all__ = [
    "ADMIN_USERNAME",
    "Actor",
    "Product",
    "ProductCandidate",
    "RETAILER_URL_FRAGMENTS",
    "Role",
    "SUPPORTED_RETAILERS",
    "is_supported_retailer",
]

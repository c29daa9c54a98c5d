"""
midas/repositories package marker.
"""

from midas.repositories.product_store import ProductStore

__all__ = [
    "ProductStore",
]

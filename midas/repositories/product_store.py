"""
midas/repositories/product_store.py

In-memory, append-only store of tracked products.
"""

from __future__ import annotations

import threading

from midas.domain.identity import Actor
from midas.domain.product import Product, ProductCandidate
from midas.validators.product_validator import validate_candidate


class ProductStore:
    """
    Holds every submitted product for the lifetime of the process.

    One lock covers the whole sequence; reads and writes are mutually
    exclusive and never perform I/O while holding it.
    """

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._lock = threading.Lock()

    def add(self, candidate: ProductCandidate, actor: Actor) -> None:
        """
        Validate the candidate and append it as a product owned by ``actor``.

        Raises InvalidRetailerError or InvalidUrlError; the store is left
        unchanged on failure.
        """

        target_price = validate_candidate(candidate)
        product = Product(
            url=candidate.url,
            name=candidate.name,
            retailer=candidate.retailer,
            target_price=target_price,
            added_by=actor.username,
        )
        with self._lock:
            self._products.append(product)

    def list_visible(self, actor: Actor) -> list[Product]:
        """
        Return the products ``actor`` may see, in insertion order.

        Admins see everything; everyone else sees only their own entries.
        """

        with self._lock:
            if actor.is_admin:
                return list(self._products)
            return [product for product in self._products if product.added_by == actor.username]

    def count(self) -> int:
        with self._lock:
            return len(self._products)

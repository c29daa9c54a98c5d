"""
midas/domain/product.py

Tracked product models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class ProductCandidate:
    """
    Raw submitted fields for a prospective product, not yet validated.
    """

    url: str
    name: str
    retailer: str
    target_price_text: str | None = None


@dataclass(frozen=True)
class Product:
    """
    One stored tracking request. Immutable once created.
    """

    url: str
    name: str
    retailer: str
    added_by: str
    target_price: float | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

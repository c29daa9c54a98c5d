"""
midas/domain/retailers.py

Supported retailers and the URL domain fragments that identify them.

Both add-validation and the retailer listing read from here.
"""

from __future__ import annotations

RETAILER_URL_FRAGMENTS: dict[str, tuple[str, ...]] = {
    "Best Buy": ("bestbuy.com",),
    "Amazon": ("amazon.com", "amzn.to", "a.co"),
}

SUPPORTED_RETAILERS: tuple[str, ...] = tuple(RETAILER_URL_FRAGMENTS)


def is_supported_retailer(retailer: str) -> bool:
    """Case-sensitive exact membership check."""
    return retailer in RETAILER_URL_FRAGMENTS


def url_matches_retailer(url: str, retailer: str) -> bool:
    """
    Return True when the URL contains one of the retailer's domain fragments.

    Matching is a case-insensitive substring test. Unknown retailers never match.
    """

    fragments = RETAILER_URL_FRAGMENTS.get(retailer)
    if not fragments:
        return False
    lowered = url.lower()
    return any(fragment in lowered for fragment in fragments)

"""
midas/validators/product_validator.py

Validation for submitted tracking requests.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from typing import Any

from midas.domain.product import ProductCandidate
from midas.domain.retailers import is_supported_retailer, url_matches_retailer

# Plain ASCII decimal text, nothing around it.
_PRICE_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


class ProductValidationError(ValueError):
    """
    Raised when a candidate product cannot be accepted.
    """

    code = "invalid_product"
    default_message = "An error occurred. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class InvalidRetailerError(ProductValidationError):
    code = "invalid_retailer"
    default_message = "Invalid retailer. Please select a supported retailer from the dropdown."


class InvalidUrlError(ProductValidationError):
    code = "invalid_url"
    default_message = "The URL doesn't match the selected retailer. Please enter a valid product URL."


def parse_target_price(text: str | None) -> float | None:
    """
    Parse an optional target price.

    Empty or unparsable input yields None instead of an error.
    """

    if not text or not _PRICE_PATTERN.fullmatch(text):
        return None
    try:
        value = float(Decimal(text))
    except (InvalidOperation, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def validate_candidate(candidate: ProductCandidate) -> float | None:
    """
    Validate a candidate and return its parsed target price.

    Checks run in order and stop at the first failure:
    retailer membership, then retailer/URL correspondence.
    """

    if not is_supported_retailer(candidate.retailer):
        raise InvalidRetailerError()
    if not url_matches_retailer(candidate.url, candidate.retailer):
        raise InvalidUrlError()
    return parse_target_price(candidate.target_price_text)

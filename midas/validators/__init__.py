"""
midas/validators package marker.
"""

from midas.validators.product_validator import (
    InvalidRetailerError,
    InvalidUrlError,
    ProductValidationError,
    parse_target_price,
    validate_candidate,
)

__all__ = [
    "InvalidRetailerError",
    "InvalidUrlError",
    "ProductValidationError",
    "parse_target_price",
    "validate_candidate",
]

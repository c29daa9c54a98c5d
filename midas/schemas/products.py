"""
midas/schemas/products.py

Request/response schemas for tracked products.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from midas.domain.identity import Role
from midas.domain.product import Product, ProductCandidate


class ProductCreateRequest(BaseModel):
    """
    Submitted add-product form. Fields are passed through unvalidated.
    """

    url: str
    name: str
    retailer: str
    target_price: str | float | None = Field(
        default=None,
        description="Optional target price, as free text or a JSON number",
    )

    def to_candidate(self) -> ProductCandidate:
        target_price = self.target_price
        if isinstance(target_price, float):
            target_price = repr(target_price)
        return ProductCandidate(
            url=self.url,
            name=self.name,
            retailer=self.retailer,
            target_price_text=target_price,
        )


class ProductResponse(BaseModel):
    url: str
    name: str
    retailer: str
    target_price: float | None
    added_by: str
    created_at: datetime

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            url=product.url,
            name=product.name,
            retailer=product.retailer,
            target_price=product.target_price,
            added_by=product.added_by,
            created_at=product.created_at,
        )


class AddProductResponse(BaseModel):
    message: str


class RetailerListResponse(BaseModel):
    retailers: list[str]


class ProductListResponse(BaseModel):
    """
    Products visible to the acting user, newest first.
    """

    username: str
    role: Role
    is_admin: bool
    products: list[ProductResponse] = Field(default_factory=list)


class DashboardResponse(BaseModel):
    """
    Dashboard summary: supported retailers and the most recent visible products.
    """

    username: str
    role: Role
    is_admin: bool
    retailers: list[str]
    recent_products: list[ProductResponse] = Field(default_factory=list)
    total_products: int = Field(..., ge=0)

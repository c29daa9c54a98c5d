"""
midas/api/routers/product_router.py

Tracked product endpoints.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from midas.api.dependencies import get_actor, get_product_store
from midas.domain.identity import Actor
from midas.domain.retailers import SUPPORTED_RETAILERS
from midas.logging_utils import log_event
from midas.repositories.product_store import ProductStore
from midas.schemas.products import (
    AddProductResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    RetailerListResponse,
)
from midas.validators.product_validator import ProductValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])

ADD_SUCCESS_MESSAGE = "Product successfully added for tracking!"


@router.get("/retailers", response_model=RetailerListResponse)
def list_retailers() -> RetailerListResponse:
    return RetailerListResponse(retailers=list(SUPPORTED_RETAILERS))


@router.post(
    "/products",
    response_model=AddProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_product(
    body: ProductCreateRequest,
    actor: Actor = Depends(get_actor),
    store: ProductStore = Depends(get_product_store),
) -> AddProductResponse:
    """
    Store a new tracking request owned by the acting user.

    Raises HTTP 400 when the retailer is unsupported or the URL does not
    belong to the selected retailer.
    """

    try:
        store.add(body.to_candidate(), actor)
    except ProductValidationError as exc:
        log_event(
            logger,
            logging.INFO,
            "product_rejected",
            actor=actor,
            retailer=body.retailer,
            code=exc.code,
        )
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exc.to_dict(),
        ) from exc

    log_event(
        logger,
        logging.INFO,
        "product_added",
        actor=actor,
        retailer=body.retailer,
        url=body.url,
    )
    return AddProductResponse(message=ADD_SUCCESS_MESSAGE)


@router.get("/products", response_model=ProductListResponse)
def view_products(
    actor: Actor = Depends(get_actor),
    store: ProductStore = Depends(get_product_store),
) -> ProductListResponse:
    """
    List every product visible to the acting user, newest first.
    """

    visible = store.list_visible(actor)
    return ProductListResponse(
        username=actor.username,
        role=actor.role,
        is_admin=actor.is_admin,
        products=[ProductResponse.from_product(product) for product in reversed(visible)],
    )

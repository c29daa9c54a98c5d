from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from typing import Any

from fastapi import FastAPI, Request

from midas.config import get_midas_settings
from midas.repositories.product_store import ProductStore


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = get_midas_settings().log_level
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Log startup and report how many products were tracked on shutdown."""
    log = logging.getLogger(__name__)
    log.info("Product store ready")
    try:
        yield
    finally:
        log.info(
            "Shutting down with %d tracked product(s); in-memory store discarded",
            application.state.product_store.count(),
        )


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application with a fresh product store.
    """

    _configure_logging()

    application = FastAPI(
        title="Midas API",
        version="1.0.0",
        lifespan=_lifespan,
    )
    application.state.product_store = ProductStore()

    from midas.api.routers import auth_router, dashboard_router, product_router

    application.include_router(auth_router)
    application.include_router(product_router)
    application.include_router(dashboard_router)

    @application.get("/health")
    def healthcheck(request: Request) -> dict[str, Any]:
        return {"status": "ok", "products": request.app.state.product_store.count()}

    return application


app = create_app()

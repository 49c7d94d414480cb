"""
FastAPI app entry point aggregating routers under catalog/routes.
Run as `uvicorn catalog.api:app`.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI

from .db import get_conn
from .repository import product_repo
from .routes.base import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)

app = FastAPI(title=APP_NAME, version=APP_VERSION)


@app.on_event("startup")
def on_startup():
    with get_conn() as conn:
        product_repo.ensure_schema(conn)
    logger.info("products schema ready")


# Include routers
from .routes import base as base_routes
from .routes import products as products_routes

app.include_router(base_routes.router)
app.include_router(products_routes.router)

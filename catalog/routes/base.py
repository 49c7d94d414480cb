from __future__ import annotations

from sqlite3 import Connection

from fastapi import APIRouter, Depends

from ..db import get_db

APP_NAME = "product-catalog-api"
APP_VERSION = "0.1.0"

router = APIRouter()


@router.get("/health")
def health(conn: Connection = Depends(get_db)):
    # Raises through to a 500 when the database file cannot be opened.
    conn.execute("SELECT 1").fetchone()
    return {"status": "ok", "db": "ok"}


@router.get("/version")
def version():
    return {"app": APP_NAME, "version": APP_VERSION}

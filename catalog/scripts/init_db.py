"""
Create the Products table in the configured database.

Usage:
  python -m catalog.scripts.init_db [--db PATH] [--seed]
"""
from __future__ import annotations

import argparse
import logging
from decimal import Decimal

from catalog.db import get_conn
from catalog.logs import LogContext
from catalog.models import Product
from catalog.repository import product_repo

SAMPLE_PRODUCTS = [
    Product(name="Laptop", description="Portable computer", price=Decimal("1200.00")),
    Product(name="Keyboard", description="Mechanical keyboard", price=Decimal("150.00")),
    Product(name="Mouse", description="Wireless", price=Decimal("50.00")),
]


def main(argv: list[str] | None = None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--db", default=None, help="SQLite file; defaults to the configured path")
    ap.add_argument("--seed", action="store_true", help="insert a few sample products")
    args = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    log = LogContext("INIT_DB")
    log.set_payload({"db": args.db, "seed": args.seed})
    ids: list[int] = []
    with get_conn(args.db) as conn:
        product_repo.ensure_schema(conn)
        if args.seed:
            repo = product_repo.SqlProductRepository(conn)
            ids = [repo.create(p) for p in SAMPLE_PRODUCTS]
    log.set_after({"seeded_ids": ids})
    log.write("OK")
    print({"message": "ok", "seeded_ids": ids})


if __name__ == "__main__":
    main()

from __future__ import annotations

import logging
from sqlite3 import Connection, Row
from typing import List, Optional

from ..models import Product

logger = logging.getLogger(__name__)


def ensure_schema(conn: Connection):
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS Products (
            Id INTEGER PRIMARY KEY AUTOINCREMENT,
            Name TEXT NOT NULL DEFAULT '',
            Description TEXT,
            Price DECIMAL TEXT NOT NULL DEFAULT '0'
        )
        """
    )


def _to_product(row: Row) -> Product:
    return Product(
        id=row["Id"],
        name=row["Name"],
        description=row["Description"],
        price=row["Price"],
    )


class SqlProductRepository:
    """SQLite-backed ProductRepository; one statement per call, on the caller's connection."""

    def __init__(self, conn: Connection):
        self.conn = conn

    def get_all(self) -> List[Product]:
        rows = self.conn.execute("SELECT Id, Name, Description, Price FROM Products").fetchall()
        return [_to_product(r) for r in rows]

    def get_by_id(self, id: int) -> Optional[Product]:
        row = self.conn.execute(
            "SELECT Id, Name, Description, Price FROM Products WHERE Id = :id",
            {"id": id},
        ).fetchone()
        return _to_product(row) if row else None

    def create(self, product: Product) -> int:
        cur = self.conn.execute(
            "INSERT INTO Products (Name, Description, Price) VALUES (:name, :description, :price)",
            {"name": product.name, "description": product.description, "price": product.price},
        )
        new_id = int(cur.lastrowid)
        logger.debug("inserted product id=%s", new_id)
        return new_id

    def update(self, product: Product) -> bool:
        cur = self.conn.execute(
            "UPDATE Products SET Name = :name, Description = :description, Price = :price WHERE Id = :id",
            {"id": product.id, "name": product.name, "description": product.description, "price": product.price},
        )
        return cur.rowcount > 0

    def delete(self, id: int) -> bool:
        cur = self.conn.execute("DELETE FROM Products WHERE Id = :id", {"id": id})
        return cur.rowcount > 0

"""Repository layer: DB access helpers (SQLite).

Keep SQL strings here so the route handlers only see `ProductRepository`.
"""
from __future__ import annotations


from typing import List, Optional, Protocol

from ..models import Product


class ProductRepository(Protocol):
    def get_all(self) -> List[Product]: ...

    def get_by_id(self, id: int) -> Optional[Product]: ...

    def create(self, product: Product) -> int: ...

    def update(self, product: Product) -> bool: ...

    def delete(self, id: int) -> bool: ...

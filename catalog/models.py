from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, field_serializer


class Product(BaseModel):
    """A catalog row. `id` is assigned by the store on create."""

    id: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    price: Decimal = Decimal("0")

    @field_serializer("price", when_used="json")
    def _price_as_number(self, v: Decimal) -> float:
        return float(v)

"""Entity: Product."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_serializer


class ProductCreate(BaseModel):
    """Request body for creating a product.

    Unknown keys, including a client-supplied ``id``, are ignored.
    """

    name: str = Field(description="Product name")
    price: Decimal = Field(description="Unit price")


class Product(ProductCreate):
    """Product as stored, including its database-assigned identifier."""

    id: int = Field(description="Database-assigned identifier")

    @field_serializer("price")
    def _serialize_price(self, price: Decimal) -> float:
        return float(price)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.price == other.price
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.price))

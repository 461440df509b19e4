"""Product database table model."""

from decimal import Decimal

from sqlmodel import Field, SQLModel


class ProductTable(SQLModel, table=True):
    """Database persistence model for products.

    The id is assigned by the database on insert and never changed afterward.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    price: Decimal = Field(max_digits=18, decimal_places=2, nullable=False)

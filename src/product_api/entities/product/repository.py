"""Data-access layer for products."""

from sqlmodel import Session, select

from .entity import Product, ProductCreate
from .table import ProductTable


class ProductRepository:
    """Session-bound product queries.

    The repository flushes but never commits; the caller owns the transaction.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Product]:
        rows = self._session.exec(select(ProductTable).order_by(ProductTable.id)).all()
        return [Product.model_validate(row, from_attributes=True) for row in rows]

    def get(self, product_id: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row, from_attributes=True)

    def create(self, product: ProductCreate) -> Product:
        row = ProductTable(name=product.name, price=product.price)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row, from_attributes=True)

    def is_empty(self) -> bool:
        return self._session.exec(select(ProductTable.id).limit(1)).first() is None

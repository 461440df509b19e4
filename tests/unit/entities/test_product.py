"""Product entity and repository tests against an in-memory SQLite database."""

from decimal import Decimal

import pytest
from sqlmodel import Session

from src.product_api.entities.product import (
    Product,
    ProductCreate,
    ProductRepository,
    ProductTable,
)


class TestProductEntity:
    """Test Product domain models."""

    def test_create_ignores_client_supplied_id(self):
        payload = ProductCreate.model_validate({"id": 42, "name": "Desk", "price": 10})

        assert payload.name == "Desk"
        assert payload.price == Decimal("10")
        assert not hasattr(payload, "id")

    def test_price_serializes_as_number(self):
        product = Product(id=1, name="Sample Mouse", price=Decimal("29.99"))

        assert product.model_dump(mode="json") == {
            "name": "Sample Mouse",
            "price": 29.99,
            "id": 1,
        }

    def test_product_equality(self):
        first = Product(id=1, name="Lamp", price=Decimal("5.00"))
        same = Product(id=1, name="Lamp", price=Decimal("5"))
        other = Product(id=2, name="Lamp", price=Decimal("5.00"))

        assert first == same
        assert first != other
        assert hash(first) == hash(same)


class TestProductRepository:
    """Test ProductRepository with a real database session."""

    @pytest.fixture
    def repository(self, session: Session) -> ProductRepository:
        return ProductRepository(session)

    def test_create_assigns_positive_unique_ids(self, repository: ProductRepository):
        first = repository.create(ProductCreate(name="Chair", price=Decimal("45.50")))
        second = repository.create(ProductCreate(name="Table", price=Decimal("120")))

        assert first.id > 0
        assert second.id > 0
        assert first.id != second.id

    def test_create_returns_stored_values(self, repository: ProductRepository):
        created = repository.create(ProductCreate(name="Chair", price=Decimal("45.50")))

        assert isinstance(created, Product)
        assert created.name == "Chair"
        assert created.price == Decimal("45.50")

    def test_get_returns_domain_entity(
        self, repository: ProductRepository, session: Session
    ):
        row = ProductTable(name="Monitor", price=Decimal("199.90"))
        session.add(row)
        session.commit()
        session.refresh(row)

        result = repository.get(row.id)

        assert isinstance(result, Product)
        assert not isinstance(result, ProductTable)
        assert result.id == row.id
        assert result.name == "Monitor"
        assert result.price == Decimal("199.90")

    def test_get_missing_returns_none(self, repository: ProductRepository):
        assert repository.get(999) is None

    def test_list_all(self, repository: ProductRepository):
        assert repository.list_all() == []

        repository.create(ProductCreate(name="Pen", price=Decimal("1.20")))
        repository.create(ProductCreate(name="Pencil", price=Decimal("0.80")))

        names = {product.name for product in repository.list_all()}
        assert names == {"Pen", "Pencil"}

    def test_is_empty(self, repository: ProductRepository):
        assert repository.is_empty() is True

        repository.create(ProductCreate(name="Pen", price=Decimal("1.20")))

        assert repository.is_empty() is False

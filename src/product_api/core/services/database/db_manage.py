"""Schema creation and sample data seeding."""

from decimal import Decimal

from loguru import logger as default_logger
from sqlmodel import SQLModel

from src.product_api.core.services.database.db_session import DbSessionService
from src.product_api.entities.product import ProductCreate, ProductRepository
from src.product_api.entities.product.table import ProductTable

SAMPLE_PRODUCTS = (
    ProductCreate(name="Sample Laptop", price=Decimal("999.99")),
    ProductCreate(name="Sample Mouse", price=Decimal("29.99")),
)


class DbManageService:
    def __init__(self, db_service: DbSessionService, logger=default_logger):
        self._db = db_service
        self._logger = logger.bind(component="db_manage")

    def ensure_schema(self) -> None:
        """Create the products table if it does not exist yet."""
        SQLModel.metadata.create_all(
            self._db.engine, tables=[ProductTable.__table__], checkfirst=True
        )

    def seed_if_empty(self) -> int:
        """Insert the sample products into an empty table; returns rows inserted."""
        with self._db.session_scope() as session:
            repository = ProductRepository(session)
            if not repository.is_empty():
                return 0
            for product in SAMPLE_PRODUCTS:
                repository.create(product)
        self._logger.info("Sample data added")
        return len(SAMPLE_PRODUCTS)

    def initialize(self, seed: bool = True) -> bool:
        """Ensure the schema and optionally seed it; failures are logged, never raised.

        Returns True when every step succeeded. Startup continues either way
        and request handlers report storage errors individually.
        """
        try:
            self._logger.info("Ensuring database and tables are created...")
            self.ensure_schema()
            self._logger.info("Database and tables created successfully!")
            if seed:
                self.seed_if_empty()
        except Exception as e:
            self._logger.opt(exception=e).error("Database creation failed: {}", e)
            return False
        return True

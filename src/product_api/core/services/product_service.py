"""Product access for request handlers, reported through StoreResult values."""

from loguru import logger as default_logger
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError

from src.product_api.core.results import ErrorKind, StoreResult
from src.product_api.core.services.database.db_session import DbSessionService
from src.product_api.entities.product import Product, ProductCreate, ProductRepository


class ProductService:
    """Runs each operation in its own session and never lets a database error escape."""

    def __init__(self, db_service: DbSessionService, logger=default_logger):
        self._db = db_service
        self._logger = logger.bind(component="products")

    def list_products(self) -> StoreResult[list[Product]]:
        try:
            with self._db.session_scope() as session:
                products = ProductRepository(session).list_all()
        except SQLAlchemyError as e:
            return self._storage_failure(e)
        return StoreResult.success(products)

    def get_product(self, product_id: int) -> StoreResult[Product]:
        try:
            with self._db.session_scope() as session:
                product = ProductRepository(session).get(product_id)
        except (OverflowError, DataError):
            # The id column cannot hold this key, so no such row was ever created
            product = None
        except SQLAlchemyError as e:
            return self._storage_failure(e)

        if product is None:
            return StoreResult.failure(
                ErrorKind.NOT_FOUND, f"Product {product_id} not found"
            )
        return StoreResult.success(product)

    def insert_product(self, product: ProductCreate) -> StoreResult[Product]:
        try:
            with self._db.session_scope() as session:
                created = ProductRepository(session).create(product)
        except (IntegrityError, DataError) as e:
            self._logger.warning("Product rejected by database: {}", e.orig)
            return StoreResult.failure(ErrorKind.VALIDATION, str(e.orig))
        except SQLAlchemyError as e:
            return self._storage_failure(e)

        self._logger.info("Created product {}", created.id)
        return StoreResult.success(created)

    def _storage_failure(self, error: SQLAlchemyError) -> StoreResult:
        self._logger.error("Database error: {}", error)
        return StoreResult.failure(ErrorKind.STORAGE, "Database error")

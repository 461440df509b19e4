"""Database initialization script."""

from loguru import logger

from src.product_api.core.services import DbManageService, DbSessionService
from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.context import get_config


def init_db(config: ConfigData | None = None) -> bool:
    """Create the products table and seed it; returns False when that failed."""
    config = config or get_config()
    db_service = DbSessionService(config.database, logger=logger)
    try:
        return DbManageService(db_service, logger=logger).initialize(
            seed=config.database.seed_sample_data
        )
    finally:
        db_service.dispose()


if __name__ == "__main__":
    raise SystemExit(0 if init_db() else 1)

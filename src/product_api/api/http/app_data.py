from dataclasses import dataclass

from loguru._logger import Logger

from src.product_api.core.services import DbSessionService, ProductService


@dataclass
class ApplicationDependencies:
    logger: Logger
    database_service: DbSessionService
    product_service: ProductService

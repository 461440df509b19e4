"""FastAPI dependency implementations."""

from __future__ import annotations

from fastapi import Request
from loguru._logger import Logger

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.core.services import ProductService


def get_product_service(request: Request) -> ProductService:
    """Get the product service built at startup."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.product_service


def get_logger(request: Request) -> Logger:
    """Get the application logger bound at startup."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.logger

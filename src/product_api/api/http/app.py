"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware
from loguru import logger
from loguru._logger import Logger
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from starlette.types import ASGIApp

from src.product_api.api.http.app_data import ApplicationDependencies
from src.product_api.api.http.routers import demo, products
from src.product_api.api.utils.app_startup import configure_logging
from src.product_api.core.services import (
    DbManageService,
    DbSessionService,
    ProductService,
)
from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.context import get_config

__all__ = ["create_app", "startup", "shutdown", "RequestLoggingMiddleware"]


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every request before it reaches its handler, then log the outcome."""

    def __init__(self, app: ASGIApp, log: Logger):
        super().__init__(app)
        self._log = log

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        start = time.perf_counter()

        with logger.contextualize(request_id=request_id):
            self._log.info("--> Request: {} {}", request.method, request.url.path)
            try:
                response = await call_next(request)
            except Exception as exc:
                duration_ms = (time.perf_counter() - start) * 1000
                self._log.opt(exception=exc).error(
                    "request.error status=500 duration_ms={:.1f}", duration_ms
                )
                return JSONResponse(
                    status_code=500,
                    content={"detail": "Internal Server Error", "request_id": request_id},
                    headers={"X-Request-ID": request_id},
                )

            duration_ms = (time.perf_counter() - start) * 1000
            self._log.info(
                "request.end status={} duration_ms={:.1f}",
                response.status_code,
                duration_ms,
            )
            response.headers.setdefault("X-Request-ID", request_id)
            return response


# --- Lifecycle hooks ---
async def startup(app: FastAPI, config: ConfigData) -> None:
    log = logger.bind(component="app")
    log.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService(config.database, logger=log)
    db_manage_service = DbManageService(database_service, logger=log)
    if not db_manage_service.initialize(seed=config.database.seed_sample_data):
        log.warning("Continuing without an initialized database")

    app.state.app_dependencies = ApplicationDependencies(
        logger=log,
        database_service=database_service,
        product_service=ProductService(database_service, logger=log),
    )


async def shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies | None = getattr(
        app.state, "app_dependencies", None
    )
    if app_dependencies is not None:
        app_dependencies.database_service.dispose()


def create_app(config: ConfigData | None = None, setup_logging: bool = True) -> FastAPI:
    """Build the application for ``config`` (the current context config by default)."""
    config = config or get_config()
    if setup_logging:
        configure_logging(config)

    production = config.app.environment == "production"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup(app, config)
        try:
            yield
        finally:
            await shutdown(app)

    app = FastAPI(
        title="Product API",
        lifespan=lifespan,
        docs_url=None if production else "/docs",
        redoc_url=None if production else "/redoc",
    )
    # Production serves plain HTTP on port 80, so it never redirects
    if config.app.https_redirect and not production:
        app.add_middleware(HTTPSRedirectMiddleware)
    # Added last so it wraps everything, redirects included
    app.add_middleware(RequestLoggingMiddleware, log=logger.bind(component="http"))

    app.include_router(demo.router)
    app.include_router(products.router)
    return app


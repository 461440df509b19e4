"""Test configuration and fixtures for the product API."""

from __future__ import annotations

from collections.abc import Callable, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from loguru import logger
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.product_api.api.http.app import create_app
from src.product_api.core.services import DbSessionService
from src.product_api.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
)


@pytest.fixture
def session() -> Generator[Session]:
    """Create a fresh in-memory database session for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from src.product_api.entities.product import ProductTable  # noqa: F401

    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()
            session.close()
            engine.dispose()


@pytest.fixture
def test_config() -> ConfigData:
    """Configuration pointing at a private in-memory SQLite database."""
    return ConfigData(
        app=AppConfig(environment="test"),
        database=DatabaseConfig(url="sqlite:///:memory:"),
    )


@pytest.fixture
def db_service(test_config: ConfigData) -> Generator[DbSessionService]:
    service = DbSessionService(test_config.database)
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def app_factory() -> Callable[[ConfigData], FastAPI]:
    def _make_app(config: ConfigData) -> FastAPI:
        return create_app(config, setup_logging=False)

    return _make_app


@pytest.fixture
def app(app_factory, test_config: ConfigData) -> FastAPI:
    return app_factory(test_config)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient]:
    """Test client with startup and shutdown hooks applied."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def log_messages() -> Generator[list[str]]:
    """Collect formatted loguru messages emitted during the test."""
    messages: list[str] = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]))
    try:
        yield messages
    finally:
        logger.remove(sink_id)

"""Database engine and session factory used across the application."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from loguru import logger as default_logger
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlmodel import Session, create_engine

from src.product_api.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    def __init__(self, db_config: DatabaseConfig, logger=default_logger):
        """Hold the database settings; the engine is built on first use."""
        self._logger = logger.bind(component="database")
        self._config = db_config
        self._engine: Engine | None = None
        self._lock = threading.Lock()

    @staticmethod
    def _get_engine_kwargs(db_config: DatabaseConfig) -> dict:
        """Get backend-specific engine arguments."""
        engine_kwargs: dict = {"echo": db_config.echo}

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,  # sessions cross threadpool workers
                "timeout": 20,  # lock timeout
            }
            # An in-memory database only exists for the connection that made it
            if make_url(db_config.url).database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,
            }
        )
        return engine_kwargs

    def _create_engine(self) -> Engine:
        try:
            connection_string = self._config.connection_string
            url = make_url(connection_string)
            self._logger.info(
                "Initializing database engine for backend {}", url.get_backend_name()
            )
            return create_engine(
                connection_string, **self._get_engine_kwargs(self._config)
            )
        except (ImportError, ValueError) as e:
            # Missing DBAPI driver or unresolvable password
            raise ArgumentError(f"Cannot create database engine: {e}") from e

    @property
    def engine(self) -> Engine:
        """The shared engine; raises ``ArgumentError`` while it cannot be built."""
        if self._engine is None:
            with self._lock:
                if self._engine is None:
                    self._engine = self._create_engine()
        return self._engine

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(self.engine, expire_on_commit=False, autoflush=True)

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Commit on success, roll back on error, always close."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            self._logger.error(
                "Database transaction failed: {}: {}", type(e).__name__, e
            )
            raise
        finally:
            db.close()

    def dispose(self) -> None:
        if self._engine is None:
            return
        self._logger.info("Disposing database engine")
        self._engine.dispose()

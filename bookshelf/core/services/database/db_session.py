"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from bookshelf.runtime.config.config_data import DatabaseConfig
from bookshelf.runtime.context import get_config


class DbSessionService:
    def __init__(
        self,
        db_config: DatabaseConfig | None = None,
        environment: str | None = None,
    ):
        """Initialize the shared database engine and session factory.

        Both arguments default to the active context configuration.
        """

        logger.info("Setting up database engine and session factory")
        self._db_config = db_config or get_config().database
        self._environment = environment or get_config().app.environment

        if self._db_config.is_sqlite and self._environment == "production":
            logger.warning(
                "SQLite is not recommended for production use. "
                "Consider PostgreSQL for better performance and reliability."
            )

        engine_kwargs = self._get_engine_kwargs(self._db_config)
        logger.info(
            "Initializing database engine for {} backend",
            "sqlite" if self._db_config.is_sqlite else "server",
        )
        self._engine = create_engine(self._db_config.connection_string, **engine_kwargs)

    @staticmethod
    def _get_engine_kwargs(db_config: DatabaseConfig) -> dict[str, Any]:
        """Get backend-specific engine arguments."""
        engine_kwargs: dict[str, Any] = {
            "pool_pre_ping": True,  # Validate connections before use
            "echo": db_config.echo,
        }

        if db_config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,  # Sessions cross threadpool workers
                "timeout": 20,  # Lock timeout
            }
            if db_config.is_in_memory:
                # One shared connection, otherwise every session gets an empty database
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
            }
        )
        return engine_kwargs

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def is_sqlite(self) -> bool:
        return self._db_config.is_sqlite

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Provide a transactional scope: commit on success, roll back on error."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(error_type=type(e).__name__).error(
                "Database transaction failed: {}", e
            )
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    def dispose(self) -> None:
        """Close all pooled connections."""
        self._engine.dispose()

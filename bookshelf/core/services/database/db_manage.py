"""Table management for the application database."""

from loguru import logger
from sqlalchemy import Engine
from sqlmodel import SQLModel


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables that do not exist yet."""
        from bookshelf.entities.book import BookTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all application tables."""
        from bookshelf.entities.book import BookTable  # noqa: F401

        SQLModel.metadata.drop_all(self._engine)
        logger.info("Database tables dropped.")

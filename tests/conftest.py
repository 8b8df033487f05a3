"""Shared fixtures: in-memory databases, test configuration and an HTTP client."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from bookshelf.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
    LoggingConfig,
)


@pytest.fixture
def session() -> Iterator[Session]:
    """Create a fresh database session for testing."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from bookshelf.entities.book import BookTable  # noqa: F401

    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        yield session

    engine.dispose()


@pytest.fixture
def test_config() -> ConfigData:
    """Configuration pointing at a private in-memory SQLite database."""
    return ConfigData(
        app=AppConfig(environment="test"),
        database=DatabaseConfig(url="sqlite://"),
        logging=LoggingConfig(level="WARNING"),
    )


@pytest.fixture
def client(test_config: ConfigData) -> Iterator[TestClient]:
    """Test client with startup and shutdown hooks run."""
    from bookshelf.api.http.app import create_app

    with TestClient(create_app(test_config)) as test_client:
        yield test_client

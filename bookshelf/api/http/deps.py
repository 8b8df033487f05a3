"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request
from sqlmodel import Session

from bookshelf.api.http.app_data import ApplicationDependencies
from bookshelf.core.services import DbSessionService


def get_database_service(request: Request) -> DbSessionService:
    """Get the database session service instance."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.database_service


def get_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session.

    Uncommitted work is rolled back when the session closes.
    """
    session = get_database_service(request).get_session()
    try:
        yield session
    finally:
        session.close()

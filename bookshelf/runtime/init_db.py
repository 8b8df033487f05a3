"""Database initialization script."""

from bookshelf.core.services import DbManageService, DbSessionService


def init_db() -> None:
    """Create all database tables for the configured database."""
    db_session_service = DbSessionService()
    try:
        DbManageService(db_session_service.engine).create_all()
    finally:
        db_session_service.dispose()


if __name__ == "__main__":
    init_db()

"""Database initialization script."""

from src.bookshelf.core.services.database.db_session import DbSessionService


def init_db(db_service: DbSessionService | None = None) -> None:
    """Create all database tables."""
    service = db_service or DbSessionService()
    try:
        service.create_all()
    finally:
        if db_service is None:
            service.dispose()


if __name__ == "__main__":
    init_db()

"""Shared CLI helpers."""

from rich.console import Console

from src.bookshelf.core.services.database.db_session import DbSessionService

console = Console()


def get_db_service() -> DbSessionService:
    """Database service with tables ensured, for one-off commands."""
    service = DbSessionService()
    service.create_all()
    return service

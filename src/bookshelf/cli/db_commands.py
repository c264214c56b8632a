"""Database management CLI commands."""

import typer

from src.bookshelf.runtime.context import get_config
from src.bookshelf.runtime.init_db import init_db

from .utils import console

db_app = typer.Typer(help="Manage the Bookshelf database")


@db_app.command("init")
def init() -> None:
    """Create all database tables."""
    init_db()
    console.print(
        f"[green]✅ Database ready at {get_config().database.url}[/green]"
    )

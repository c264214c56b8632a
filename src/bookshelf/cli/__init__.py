"""Main CLI application module."""

import typer

from src.bookshelf.runtime.context import get_config

from .db_commands import db_app
from .frontend_commands import frontend_app
from .user_commands import users_app

app = typer.Typer(
    help="📚 Bookshelf CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(users_app, name="users")
app.add_typer(frontend_app, name="frontend")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind host (defaults to config)"),
    port: int | None = typer.Option(None, "--port", help="Bind port (defaults to config)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the API with uvicorn."""
    import uvicorn

    cfg = get_config().app
    uvicorn.run(
        "src.bookshelf.api.http.app:app",
        host=host or cfg.host,
        port=port or cfg.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()

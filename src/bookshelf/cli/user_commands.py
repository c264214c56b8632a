"""User management CLI commands."""

import typer
from rich.prompt import Confirm
from rich.table import Table

from src.bookshelf.core.services import AuthenticationService
from src.bookshelf.entities.core.user import UserRepository

from .utils import console, get_db_service

users_app = typer.Typer(help="Manage API users")


@users_app.command("add")
def add_user(
    username: str = typer.Argument(..., help="Username for the new user"),
    password: str = typer.Option(
        ...,
        "--password",
        "-p",
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password",
    ),
    enabled: bool = typer.Option(True, "--enabled/--disabled", help="Enable the user"),
) -> None:
    """Add a user that can obtain API tokens."""
    service = get_db_service()
    try:
        with service.session_scope() as session:
            user = AuthenticationService(session).register_user(
                username, password, is_active=enabled
            )
            user_id = user.id
    except ValueError as e:
        console.print(f"[red]❌ Failed to create user: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        service.dispose()

    console.print(f"[green]✅ Created user '{username}' ({user_id})[/green]")


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    service = get_db_service()
    try:
        with service.session_scope() as session:
            users = UserRepository(session).list_all()
    finally:
        service.dispose()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Enabled", style="yellow")
    table.add_column("Created", style="magenta")

    for user in users:
        table.add_row(
            user.id,
            user.username,
            "✅" if user.is_active else "❌",
            user.created_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("delete")
def delete_user(
    username: str = typer.Argument(..., help="Username to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Delete a user."""
    if not force and not Confirm.ask(f"Delete user '{username}'?"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=0)

    service = get_db_service()
    try:
        with service.session_scope() as session:
            repo = UserRepository(session)
            user = repo.get_by_username(username)
            deleted = user is not None and repo.delete(user.id)
    finally:
        service.dispose()

    if not deleted:
        console.print(f"[red]❌ User '{username}' not found[/red]")
        raise typer.Exit(code=1)

    console.print(f"[green]✅ Deleted user '{username}'[/green]")

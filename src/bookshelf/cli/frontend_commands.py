"""Commands that drive the book list view against a running API."""

from pathlib import Path

import typer

from src.bookshelf.frontend import BookListView, create_api_client

from .utils import console

frontend_app = typer.Typer(help="Render the book list from a running API")


def _mounted_view(api_url: str | None) -> BookListView:
    with create_api_client(api_url) as client:
        view = BookListView(client)
        view.mount()
    return view


@frontend_app.command("show")
def show(
    api_url: str | None = typer.Option(
        None, "--api-url", help="API root, e.g. http://localhost:8000/api/"
    ),
) -> None:
    """Print every book as 'title - author'."""
    view = _mounted_view(api_url)
    console.print(f"[bold]{view.heading}[/bold]")
    for line in view.lines():
        console.print(f"  • {line}", markup=False)


@frontend_app.command("render")
def render(
    api_url: str | None = typer.Option(
        None, "--api-url", help="API root, e.g. http://localhost:8000/api/"
    ),
    output: Path = typer.Option(
        Path("book_list.html"), "--output", "-o", help="HTML file to write"
    ),
) -> None:
    """Write the book list as a static HTML page."""
    view = _mounted_view(api_url)
    output.write_text(view.render_html(), encoding="utf-8")
    console.print(f"[green]✅ Wrote {len(view.books)} books to {output}[/green]")

"""One-shot book list view: fetch once, then render."""

from pathlib import Path

import httpx
from jinja2 import Environment, FileSystemLoader, select_autoescape
from loguru import logger
from pydantic import TypeAdapter

from src.bookshelf.entities.service.book import Book

_books_adapter = TypeAdapter(list[Book])


def get_template_env() -> Environment:
    """Get Jinja2 environment for template rendering."""
    template_dir = Path(__file__).parent / "templates"
    return Environment(
        loader=FileSystemLoader(template_dir),
        autoescape=select_autoescape(["html", "j2"]),
    )


class BookListView:
    """Fetches the book collection on mount and renders ``title - author`` lines.

    Failures are logged and never surfaced; the list then stays empty.
    """

    heading = "📚 Book List"

    def __init__(self, client: httpx.Client):
        self._client = client
        self._mounted = False
        self.books: list[Book] = []

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        """Issue the single read of the collection; later calls do nothing."""
        if self._mounted:
            return
        self._mounted = True

        try:
            response = self._client.get("books/")
            response.raise_for_status()
            self.books = _books_adapter.validate_python(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.bind(error_type=type(exc).__name__).error(
                "Failed to load books: {}", exc
            )

    def lines(self) -> list[str]:
        return [f"{book.title} - {book.author}" for book in self.books]

    def render_html(self) -> str:
        template = get_template_env().get_template("book_list.html.j2")
        return template.render(heading=self.heading, books=self.books)

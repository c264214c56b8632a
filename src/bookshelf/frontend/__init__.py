"""Client-side view of the book list."""

from .api import create_api_client
from .book_list import BookListView

__all__ = ["BookListView", "create_api_client"]

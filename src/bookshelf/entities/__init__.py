"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain / wire model
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .core.user import User, UserRepository, UserTable
from .service.book import Book, BookCreate, BookRepository, BookTable, BookUpdate

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "Book",
    "BookCreate",
    "BookUpdate",
    "BookTable",
    "BookRepository",
]

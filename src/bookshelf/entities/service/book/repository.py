"""Book repository for data access operations."""

from sqlmodel import Session, select

from .entity import Book, BookCreate, BookUpdate
from .table import BookTable

# Largest value a signed 64-bit INTEGER column can hold
MAX_BOOK_ID = 2**63 - 1


class BookRepository:
    """Data-access layer for books.

    The repository flushes but never commits; transaction boundaries belong
    to the caller.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Book]:
        rows = self._session.exec(select(BookTable)).all()
        return [Book.model_validate(row) for row in rows]

    def _get_row(self, book_id: int) -> BookTable | None:
        if not 0 < book_id <= MAX_BOOK_ID:
            return None
        return self._session.get(BookTable, book_id)

    def get(self, book_id: int) -> Book | None:
        row = self._get_row(book_id)
        if row is None:
            return None
        return Book.model_validate(row)

    def create(self, data: BookCreate) -> Book:
        row = BookTable(**data.model_dump())
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row)

    def update(self, book_id: int, data: BookUpdate) -> Book:
        row = self._get_row(book_id)
        if row is None:
            raise ValueError(f"Book {book_id} not found")

        for field_name, value in data.model_dump(exclude_unset=True).items():
            setattr(row, field_name, value)

        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Book.model_validate(row)

    def delete(self, book_id: int) -> bool:
        row = self._get_row(book_id)
        if row is None:
            return False
        self._session.delete(row)
        self._session.flush()
        return True

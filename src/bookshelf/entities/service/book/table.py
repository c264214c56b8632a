"""Book database table model."""

from datetime import date

from sqlmodel import Field, SQLModel

from .entity import AUTHOR_MAX_LENGTH, TITLE_MAX_LENGTH


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    Books use an integer autoincrement key rather than the UUID key of
    ``EntityTable`` because the id is part of the public URL.
    """

    __tablename__ = "book"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    author: str = Field(max_length=AUTHOR_MAX_LENGTH)
    published_date: date

"""Entity: Book.

These models double as the JSON representation of a book. ``id`` is assigned
by the database and only ever appears on ``Book``; create and update payloads
silently drop it.
"""

from datetime import date
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator

TITLE_MAX_LENGTH = 200
AUTHOR_MAX_LENGTH = 100

Title = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=TITLE_MAX_LENGTH)
]
Author = Annotated[
    str, StringConstraints(strip_whitespace=True, min_length=1, max_length=AUTHOR_MAX_LENGTH)
]


class BookBase(BaseModel):
    title: Title = Field(description="Title")
    author: Author = Field(description="Author")
    published_date: date = Field(description="Publication date (YYYY-MM-DD)")


class BookCreate(BookBase):
    """Payload for creating a book."""


class BookUpdate(BaseModel):
    """Payload for updating a book; only the supplied fields are applied."""

    title: Title | None = None
    author: Author | None = None
    published_date: date | None = None

    @field_validator("title", "author", "published_date", mode="before")
    @classmethod
    def _not_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("This field may not be null.")
        return value


class Book(BookBase):
    """A stored book."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Unique identifier assigned on creation")

"""User database table model."""

from sqlmodel import Field

from src.bookshelf.entities.core._base import EntityTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    __tablename__ = "users"

    username: str = Field(max_length=150, unique=True, index=True)
    password_hash: str
    is_active: bool = True

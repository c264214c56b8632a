"""User domain entity."""

from typing import Any

from pydantic import Field

from src.bookshelf.entities.core._base import Entity


class User(Entity):
    """An account that can obtain API tokens.

    Only the password hash is kept; the plain password never reaches this model.
    """

    username: str = Field(min_length=1, max_length=150, description="Login name")
    password_hash: str = Field(description="Encoded PBKDF2 password hash", repr=False)
    is_active: bool = Field(default=True, description="Whether the account may log in")

    def __eq__(self, other: Any) -> bool:
        """Compare users by business attributes, ignoring timestamps."""
        if not isinstance(other, User):
            return False

        return (
            self.id == other.id
            and self.username == other.username
            and self.password_hash == other.password_hash
            and self.is_active == other.is_active
        )

    def __hash__(self) -> int:
        """Hash based on business attributes, ignoring timestamps."""
        return hash((self.id, self.username, self.password_hash, self.is_active))

from loguru import logger
from sqlmodel import Session

from src.bookshelf.core.security import hash_password, verify_password
from src.bookshelf.entities.core.user.entity import User
from src.bookshelf.entities.core.user.repository import UserRepository
from src.bookshelf.runtime.context import get_config


class AuthenticationService:
    """Credential checks and account registration."""

    def __init__(self, db_session: Session):
        self._user_repo = UserRepository(db_session)
        self._db_session = db_session

    def authenticate(self, username: str, password: str) -> User | None:
        """Return the active user matching the credentials, or None."""
        user = self._user_repo.get_by_username(username)
        if user is None:
            logger.info("Login failed: unknown user {}", username)
            return None
        if not verify_password(password, user.password_hash):
            logger.info("Login failed: bad password for {}", username)
            return None
        if not user.is_active:
            logger.info("Login failed: inactive user {}", username)
            return None
        return user

    def register_user(self, username: str, password: str, is_active: bool = True) -> User:
        """Create a user with a freshly hashed password.

        Raises:
            ValueError: On blank input or an existing username
        """
        username = username.strip()
        if not username:
            raise ValueError("Username must not be empty")
        if not password:
            raise ValueError("Password must not be empty")
        if self._user_repo.get_by_username(username) is not None:
            raise ValueError(f"User '{username}' already exists")

        iterations = get_config().auth.password_hash_iterations
        user = User(
            username=username,
            password_hash=hash_password(password, iterations=iterations),
            is_active=is_active,
        )
        created = self._user_repo.create(user)
        logger.info("Registered user {}", created.username)
        return created

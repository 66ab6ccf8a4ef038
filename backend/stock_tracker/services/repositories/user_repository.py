"""User data access layer."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from stock_tracker.models import User
from stock_tracker.services.repositories.exceptions import DuplicateError, NotFoundError

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    """Emails are stored trimmed and lowercased."""
    return email.strip().lower()


class UserRepository:
    """Centralized user data access.

    Naming conventions:
    - find_* : Query that may return None
    - get_* : Query that raises NotFoundError if missing
    - create : Insert new record
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, user_id: str) -> User | None:
        """Find user by primary key."""
        return self._db.query(User).filter(User.id == user_id).first()

    def get_by_id(self, user_id: str) -> User:
        """Get user by primary key, raising NotFoundError if missing."""
        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive, exact match)."""
        return self._db.query(User).filter(User.email == normalize_email(email)).first()

    def create(self, email: str, name: str | None = None) -> User:
        """Create a new user.

        Raises:
            DuplicateError: If the email is already registered
        """
        email = normalize_email(email)
        if self.find_by_email(email) is not None:
            raise DuplicateError("User", "email", email)

        user = User(email=email, name=name)
        self._db.add(user)
        try:
            self._db.flush()
        except IntegrityError as e:
            # Lost a race with a concurrent registration on the unique index
            self._db.rollback()
            logger.warning(f"Duplicate registration for {email} rejected by the database")
            raise DuplicateError("User", "email", email) from e
        logger.info(f"Created user {user.id}")
        return user

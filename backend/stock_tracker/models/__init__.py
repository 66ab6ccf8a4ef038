"""SQLAlchemy ORM models."""

from stock_tracker.models.transaction import Transaction
from stock_tracker.models.user import User

__all__ = [
    "Transaction",
    "User",
]

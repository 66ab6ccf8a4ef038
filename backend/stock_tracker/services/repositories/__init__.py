"""Repository layer - data access abstraction.

Repositories handle all database queries, providing a clean interface
for services and routers.

Dependency direction: Services -> Repositories -> Models
"""

from .exceptions import DuplicateError, NotFoundError, RepositoryError
from .transaction_repository import TransactionRepository
from .user_repository import UserRepository

__all__ = [
    "DuplicateError",
    "NotFoundError",
    "RepositoryError",
    "TransactionRepository",
    "UserRepository",
]

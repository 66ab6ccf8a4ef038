"""Transaction data access layer.

All writes of buy/sell transactions go through here so that the stored rows
always satisfy the transaction invariants: nonzero signed quantity, uppercased
symbol, and exactly one of the buy/sell price+date pairs.
"""

import logging
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import desc, func
from sqlalchemy.orm import Session

from stock_tracker.models import Transaction
from stock_tracker.services.repositories.exceptions import NotFoundError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


def normalize_symbol(symbol: str) -> str:
    """Tickers are stored uppercased and without surrounding whitespace."""
    return symbol.strip().upper()


class TransactionRepository:
    """Centralized transaction data access.

    Naming conventions:
    - find_* : Query that may return None
    - get_* : Query that raises NotFoundError if missing
    - create_* : Insert new record
    """

    def __init__(self, db: Session) -> None:
        self._db = db

    def find_by_id(self, transaction_id: int) -> Transaction | None:
        """Find transaction by primary key."""
        return self._db.query(Transaction).filter(Transaction.id == transaction_id).first()

    def get_by_id(self, transaction_id: int) -> Transaction:
        """Get transaction by primary key, raising NotFoundError if missing."""
        transaction = self.find_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction", transaction_id)
        return transaction

    def find_by_user(self, user_id: str) -> "Sequence[Transaction]":
        """Find all transactions for a user, in insertion order."""
        return (
            self._db.query(Transaction)
            .filter(Transaction.user_id == user_id)
            .order_by(Transaction.id)
            .all()
        )

    def count_by_user(self, user_id: str) -> int:
        """Count transactions for a user."""
        return (
            self._db.query(func.count(Transaction.id))
            .filter(Transaction.user_id == user_id)
            .scalar()
        )

    def find_page_by_user(
        self, user_id: str, page: int = 1, per_page: int = 5
    ) -> "Sequence[Transaction]":
        """Find one page of a user's transactions, most recent first.

        Args:
            user_id: Owner of the transactions
            page: 1-based page number
            per_page: Page size
        """
        offset = (max(page, 1) - 1) * per_page
        effective_date = func.coalesce(Transaction.buy_date, Transaction.sell_date)
        return (
            self._db.query(Transaction)
            .filter(Transaction.user_id == user_id)
            .order_by(desc(effective_date), desc(Transaction.id))
            .offset(offset)
            .limit(per_page)
            .all()
        )

    def create_buy(
        self,
        user_id: str,
        symbol: str,
        quantity: int,
        price: Decimal,
        when: datetime,
    ) -> Transaction:
        """Record a buy. Quantity is given as a positive share count."""
        if quantity <= 0:
            raise ValueError(f"Buy quantity must be positive, got {quantity}")

        transaction = Transaction(
            user_id=user_id,
            symbol=normalize_symbol(symbol),
            quantity=quantity,
            buy_price=price,
            buy_date=when,
        )
        return self._add(transaction)

    def create_sell(
        self,
        user_id: str,
        symbol: str,
        quantity: int,
        price: Decimal,
        when: datetime,
    ) -> Transaction:
        """Record a sell. Quantity is given as a positive share count and stored negated.

        Selling more than is currently held is allowed.
        """
        if quantity <= 0:
            raise ValueError(f"Sell quantity must be positive, got {quantity}")

        transaction = Transaction(
            user_id=user_id,
            symbol=normalize_symbol(symbol),
            quantity=-quantity,
            sell_price=price,
            sell_date=when,
        )
        return self._add(transaction)

    def delete(self, transaction: Transaction) -> None:
        """Delete a transaction."""
        self._db.delete(transaction)
        self._db.flush()
        logger.info(f"Deleted transaction {transaction.id} ({transaction.symbol})")

    def _add(self, transaction: Transaction) -> Transaction:
        self._db.add(transaction)
        self._db.flush()
        logger.info(
            f"Recorded {transaction.type.lower()} of {abs(transaction.quantity)} "
            f"{transaction.symbol} for user {transaction.user_id}"
        )
        return transaction

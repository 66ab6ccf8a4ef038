"""Value objects for holdings aggregation."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Protocol


class TransactionLike(Protocol):
    """Anything the aggregator can fold: ORM rows or TransactionData."""

    symbol: str
    quantity: int
    buy_price: Decimal | None
    sell_price: Decimal | None
    buy_date: datetime | None
    sell_date: datetime | None


@dataclass(frozen=True)
class TransactionData:
    """Plain transaction record, detached from the database."""

    symbol: str
    quantity: int
    buy_price: Decimal | None = None
    sell_price: Decimal | None = None
    buy_date: datetime | None = None
    sell_date: datetime | None = None
    id: int | None = None
    user_id: str | None = None


@dataclass
class HoldingSummary:
    """Derived per-symbol position. Recomputed on every read, never stored."""

    symbol: str
    total_quantity: int
    avg_price: Decimal
    total_value: Decimal
    last_transaction: datetime
    status: str

    sell_price: Decimal | None = None
    buy_date: datetime | None = None
    sell_date: datetime | None = None
    profit_loss: Decimal | None = None


@dataclass
class EnrichedHolding:
    """Holding with display-time quote data attached."""

    holding: HoldingSummary
    current_price: Decimal | None = None
    potential_pl: Decimal | None = None

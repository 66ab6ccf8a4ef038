"""Holdings aggregation - derives per-symbol positions from transaction history.

Transactions are grouped by symbol, ordered by their effective date and folded
into a HoldingSummary. Cost basis uses a single running weighted average: buys
add to the cost total, sells only reduce the open quantity.

This module is pure. It never touches the database or the network, so it can be
called with ORM rows or with TransactionData values alike.
"""

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal

from stock_tracker.constants import HoldingStatus
from stock_tracker.services.portfolio.holding_types import HoldingSummary, TransactionLike

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


def round_money(value: Decimal) -> Decimal:
    """Round a monetary amount half-up to 2 decimal places."""
    return value.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def to_decimal(value) -> Decimal:
    """Coerce a price to Decimal. Missing prices count as zero."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    # Floats go through str() to keep their printed value
    return Decimal(str(value))


def effective_date(transaction: TransactionLike) -> datetime | None:
    """Buy date for buys, sell date for sells."""
    if transaction.buy_date is not None:
        return transaction.buy_date
    return transaction.sell_date


def _sort_key(transaction: TransactionLike) -> float:
    # Undated transactions sort first (epoch zero)
    when = effective_date(transaction)
    return when.timestamp() if when is not None else 0.0


def _transaction_price(transaction: TransactionLike) -> Decimal:
    price = transaction.buy_price if transaction.buy_price is not None else transaction.sell_price
    return to_decimal(price)


def calculate_holdings(transactions: Iterable[TransactionLike]) -> list[HoldingSummary]:
    """Calculate holdings from a list of transactions.

    Args:
        transactions: Transactions of a single user, in any order and for any
            number of symbols

    Returns:
        One HoldingSummary per symbol, most recently traded first.
        Empty input gives an empty list.
    """
    by_symbol: dict[str, list[TransactionLike]] = defaultdict(list)
    for transaction in transactions:
        by_symbol[transaction.symbol].append(transaction)

    holdings = []
    for symbol, symbol_transactions in by_symbol.items():
        ordered = sorted(symbol_transactions, key=_sort_key)
        holdings.append(summarize_symbol(symbol, ordered))

    holdings.sort(key=lambda h: h.last_transaction.timestamp(), reverse=True)

    logger.debug(
        f"Aggregated {sum(len(t) for t in by_symbol.values())} transactions "
        f"into {len(holdings)} holdings"
    )
    return holdings


def summarize_symbol(symbol: str, ordered: Sequence[TransactionLike]) -> HoldingSummary:
    """Fold the date-ordered transactions of one symbol into a holding.

    Args:
        symbol: Ticker the transactions belong to
        ordered: Non-empty list of transactions, oldest first

    Returns:
        HoldingSummary for the symbol
    """
    net_quantity = 0
    total_value = ZERO
    buy_date: datetime | None = None
    sell_date: datetime | None = None
    sell_price: Decimal | None = None
    seen_buy = False
    seen_sell = False

    for transaction in ordered:
        quantity = transaction.quantity
        price = _transaction_price(transaction)

        if quantity > 0:
            if not seen_buy:
                buy_date = transaction.buy_date
                seen_buy = True
            # Only buys feed the average cost
            total_value += quantity * price
        elif quantity < 0 and not seen_sell:
            sell_date = transaction.sell_date
            sell_price = price
            seen_sell = True

        net_quantity += quantity

    total_bought_quantity = sum(t.quantity for t in ordered if t.quantity > 0)

    if total_bought_quantity > 0:
        avg_price = round_money(total_value / total_bought_quantity)
    else:
        avg_price = round_money(ZERO)

    status = HoldingStatus.CLOSED if net_quantity == 0 else HoldingStatus.OPEN

    # A zero sell price is treated as "no sell recorded"
    profit_loss = None
    if status == HoldingStatus.CLOSED and sell_price:
        profit_loss = round_money((sell_price - avg_price) * total_bought_quantity)

    last_transaction = effective_date(ordered[-1]) or datetime.now(UTC)

    return HoldingSummary(
        symbol=symbol,
        total_quantity=abs(net_quantity),
        avg_price=avg_price,
        total_value=round_money(abs(total_value)),
        last_transaction=last_transaction,
        status=status,
        sell_price=round_money(sell_price) if sell_price else None,
        buy_date=buy_date,
        sell_date=sell_date,
        profit_loss=profit_loss,
    )

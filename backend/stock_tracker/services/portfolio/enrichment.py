"""Display-time enrichment of computed holdings with live quotes."""

from collections.abc import Mapping, Sequence
from decimal import Decimal

from stock_tracker.constants import HoldingStatus
from stock_tracker.services.portfolio.holding_types import EnrichedHolding, HoldingSummary
from stock_tracker.services.portfolio.holdings_calculator import round_money


def calculate_potential_pl(holding: HoldingSummary, current_price: Decimal | None) -> Decimal | None:
    """Unrealized P&L of an open holding at the given price.

    Closed holdings and holdings without a quote have no potential P&L.
    """
    if current_price is None or holding.status == HoldingStatus.CLOSED:
        return None
    return round_money((current_price - holding.avg_price) * holding.total_quantity)


def enrich_holdings(
    holdings: Sequence[HoldingSummary],
    prices: Mapping[str, Decimal],
) -> list[EnrichedHolding]:
    """Attach current price and potential P&L to each holding.

    The holdings themselves are not modified; order is preserved.
    """
    enriched = []
    for holding in holdings:
        current_price = prices.get(holding.symbol)
        enriched.append(
            EnrichedHolding(
                holding=holding,
                current_price=current_price,
                potential_pl=calculate_potential_pl(holding, current_price),
            )
        )
    return enriched

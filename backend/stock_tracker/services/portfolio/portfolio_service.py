"""Portfolio service - loads a user's transactions and derives holdings."""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.orm import Session

from stock_tracker.constants import HoldingStatus
from stock_tracker.services.portfolio.enrichment import enrich_holdings
from stock_tracker.services.portfolio.holding_types import EnrichedHolding, HoldingSummary
from stock_tracker.services.portfolio.holdings_calculator import calculate_holdings
from stock_tracker.services.repositories.transaction_repository import TransactionRepository

if TYPE_CHECKING:
    from stock_tracker.services.market_data.alpha_vantage_client import AlphaVantageClient

logger = logging.getLogger(__name__)


class PortfolioService:
    """Computes holdings for a user on every read.

    The quote client is optional; without one, enriched holdings simply carry
    no current price.
    """

    def __init__(self, db: Session, quote_client: "AlphaVantageClient | None" = None) -> None:
        self._db = db
        self._transactions = TransactionRepository(db)
        self._quote_client = quote_client

    def get_holdings(self, user_id: str) -> list[HoldingSummary]:
        """Aggregate all of a user's transactions into holdings."""
        transactions = self._transactions.find_by_user(user_id)
        return calculate_holdings(transactions)

    def get_enriched_holdings(self, user_id: str) -> list[EnrichedHolding]:
        """Holdings with current price and potential P&L for open positions."""
        holdings = self.get_holdings(user_id)

        open_symbols = [h.symbol for h in holdings if h.status == HoldingStatus.OPEN]
        prices = {}
        if self._quote_client is not None and open_symbols:
            prices = self._quote_client.get_current_prices(open_symbols)
            logger.debug(f"Fetched {len(prices)}/{len(open_symbols)} prices for user {user_id}")

        return enrich_holdings(holdings, prices)

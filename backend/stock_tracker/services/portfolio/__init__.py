"""Portfolio services.

Holdings aggregation, display-time enrichment and the service tying them to
the transaction store.
"""

from .enrichment import calculate_potential_pl, enrich_holdings
from .holding_types import EnrichedHolding, HoldingSummary, TransactionData
from .holdings_calculator import calculate_holdings
from .portfolio_service import PortfolioService

__all__ = [
    "EnrichedHolding",
    "HoldingSummary",
    "PortfolioService",
    "TransactionData",
    "calculate_holdings",
    "calculate_potential_pl",
    "enrich_holdings",
]

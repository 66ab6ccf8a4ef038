"""Market data clients."""

from .alpha_vantage_client import (
    AlphaVantageClient,
    AlphaVantageError,
    DailyBar,
    StockQuote,
    SymbolMatch,
)

__all__ = [
    "AlphaVantageClient",
    "AlphaVantageError",
    "DailyBar",
    "StockQuote",
    "SymbolMatch",
]

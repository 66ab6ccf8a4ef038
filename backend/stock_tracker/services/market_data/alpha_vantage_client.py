"""Alpha Vantage client for stock quotes, symbol search and daily history.

Quotes are used only to decorate holdings for display (current price,
potential P&L). Nothing computed from them is stored.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from stock_tracker.config import settings
from stock_tracker.services.shared.http_client import HTTPClient, HTTPClientError

logger = logging.getLogger(__name__)

QUERY_PATH = "/query"
MIN_SEARCH_LENGTH = 2


class AlphaVantageError(HTTPClientError):
    """Raised when Alpha Vantage is unusable or returns an error payload."""


@dataclass
class StockQuote:
    """Latest quote for a symbol (GLOBAL_QUOTE)."""

    symbol: str
    open: Decimal | None
    high: Decimal | None
    low: Decimal | None
    price: Decimal | None
    volume: int | None
    latest_trading_day: str | None
    previous_close: Decimal | None
    change: Decimal | None
    change_percent: str | None


@dataclass
class SymbolMatch:
    """One result of a symbol search (SYMBOL_SEARCH)."""

    symbol: str
    name: str
    type: str | None
    region: str | None
    market_open: str | None
    market_close: str | None
    timezone: str | None
    currency: str | None
    match_score: Decimal | None


@dataclass
class DailyBar:
    """One day of adjusted price history (TIME_SERIES_DAILY_ADJUSTED)."""

    date: str
    open: Decimal
    high: Decimal
    low: Decimal
    close: Decimal
    adjusted_close: Decimal
    volume: int
    dividend_amount: Decimal
    split_coefficient: Decimal


def _decimal(value: Any) -> Decimal | None:
    if value in (None, ""):
        return None
    try:
        return Decimal(str(value))
    except InvalidOperation:
        return None


def _int(value: Any) -> int | None:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


class AlphaVantageClient(HTTPClient):
    """Client for the Alpha Vantage query API.

    Usage:
        with AlphaVantageClient() as client:
            quote = client.get_quote("AAPL")
            matches = client.search_symbols("micro")
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        super().__init__(
            base_url=base_url or settings.alpha_vantage_base_url,
            timeout=timeout if timeout is not None else settings.quote_timeout_seconds,
            headers={"Accept": "application/json"},
        )
        self.api_key = api_key if api_key is not None else settings.alpha_vantage_api_key

    def _query(self, function: str, **params: str) -> dict:
        """Call the query endpoint and check the payload for API-level errors.

        Raises:
            AlphaVantageError: Missing API key, rate limit or error message payload
            HTTPClientError: Transport failure
        """
        if not self.api_key:
            raise AlphaVantageError("Alpha Vantage API key not configured")

        data = self.get_json(
            QUERY_PATH, params={"function": function, **params, "apikey": self.api_key}
        )

        if "Note" in data:
            raise AlphaVantageError("API rate limit exceeded. Please try again later.")
        if "Error Message" in data:
            raise AlphaVantageError(data["Error Message"])
        return data

    def get_quote(self, symbol: str) -> StockQuote | None:
        """Get the latest quote for a symbol.

        Returns:
            StockQuote, or None if Alpha Vantage has no quote for the symbol
        """
        data = self._query("GLOBAL_QUOTE", symbol=symbol)
        quote = data.get("Global Quote")
        if not quote or not quote.get("01. symbol"):
            return None

        return StockQuote(
            symbol=quote["01. symbol"],
            open=_decimal(quote.get("02. open")),
            high=_decimal(quote.get("03. high")),
            low=_decimal(quote.get("04. low")),
            price=_decimal(quote.get("05. price")),
            volume=_int(quote.get("06. volume")),
            latest_trading_day=quote.get("07. latest trading day"),
            previous_close=_decimal(quote.get("08. previous close")),
            change=_decimal(quote.get("09. change")),
            change_percent=quote.get("10. change percent"),
        )

    def search_symbols(self, query: str) -> list[SymbolMatch]:
        """Search tickers by keyword.

        US-listed, USD-traded matches are preferred; when none exist all matches
        are returned.
        """
        if not query or len(query) < MIN_SEARCH_LENGTH:
            return []

        data = self._query("SYMBOL_SEARCH", keywords=query)
        matches = [
            SymbolMatch(
                symbol=match.get("1. symbol", ""),
                name=match.get("2. name", ""),
                type=match.get("3. type"),
                region=match.get("4. region"),
                market_open=match.get("5. marketOpen"),
                market_close=match.get("6. marketClose"),
                timezone=match.get("7. timezone"),
                currency=match.get("8. currency"),
                match_score=_decimal(match.get("9. matchScore")),
            )
            for match in data.get("bestMatches") or []
        ]

        us_matches = [m for m in matches if m.region == "United States" and m.currency == "USD"]
        return us_matches or matches

    def get_daily_adjusted(self, symbol: str) -> list[DailyBar] | None:
        """Get daily adjusted price history, most recent first.

        Returns:
            List of DailyBar, or None if the payload has no time series
        """
        data = self._query("TIME_SERIES_DAILY_ADJUSTED", symbol=symbol)
        series = data.get("Time Series (Daily)")
        if not series:
            return None

        bars = [
            DailyBar(
                date=day,
                open=Decimal(values["1. open"]),
                high=Decimal(values["2. high"]),
                low=Decimal(values["3. low"]),
                close=Decimal(values["4. close"]),
                adjusted_close=Decimal(values["5. adjusted close"]),
                volume=int(values["6. volume"]),
                dividend_amount=Decimal(values["7. dividend amount"]),
                split_coefficient=Decimal(values["8. split coefficient"]),
            )
            for day, values in series.items()
        ]
        bars.sort(key=lambda bar: bar.date, reverse=True)
        return bars

    def get_current_prices(self, symbols: Iterable[str]) -> dict[str, Decimal]:
        """Get current prices for several symbols.

        Symbols whose quote cannot be fetched are left out of the result.
        """
        prices: dict[str, Decimal] = {}
        for symbol in dict.fromkeys(symbols):
            try:
                quote = self.get_quote(symbol)
            except HTTPClientError as e:
                logger.warning(f"Failed to fetch price for {symbol}: {e}")
                continue

            if quote is not None and quote.price is not None:
                prices[symbol] = quote.price
        return prices

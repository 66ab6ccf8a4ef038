"""Quote provider dependency."""

from collections.abc import Generator

from stock_tracker.services.market_data.alpha_vantage_client import AlphaVantageClient


def get_quote_client() -> Generator[AlphaVantageClient, None, None]:
    """Yield a quote client for the duration of a request."""
    with AlphaVantageClient() as client:
        yield client

"""Pydantic schemas for quote lookups."""

from pydantic import BaseModel


class QuoteResponse(BaseModel):
    """Latest quote for a symbol."""

    symbol: str
    price: float | None = None
    open: float | None = None
    high: float | None = None
    low: float | None = None
    previous_close: float | None = None
    change: float | None = None
    change_percent: str | None = None
    volume: int | None = None
    latest_trading_day: str | None = None


class SymbolSearchResult(BaseModel):
    """One symbol search match."""

    symbol: str
    name: str
    type: str | None = None
    region: str | None = None
    currency: str | None = None
    match_score: float | None = None


class DailyBarResponse(BaseModel):
    """One day of adjusted price history."""

    date: str
    open: float
    high: float
    low: float
    close: float
    adjusted_close: float
    volume: int
    dividend_amount: float
    split_coefficient: float

"""Pydantic schemas for API request/response validation."""

from stock_tracker.schemas.common import MessageResponse, PaginatedResponse
from stock_tracker.schemas.holding import HoldingResponse
from stock_tracker.schemas.market_data import (
    DailyBarResponse,
    QuoteResponse,
    SymbolSearchResult,
)
from stock_tracker.schemas.transaction import Transaction, TransactionCreateRequest
from stock_tracker.schemas.user import User, UserCreate

__all__ = [
    "DailyBarResponse",
    "HoldingResponse",
    "MessageResponse",
    "PaginatedResponse",
    "QuoteResponse",
    "SymbolSearchResult",
    "Transaction",
    "TransactionCreateRequest",
    "User",
    "UserCreate",
]

"""Pydantic schemas for Transaction model."""

import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TransactionCreateRequest(BaseModel):
    """Schema for recording a buy or sell (user-facing).

    Quantity is always a positive share count; the side comes from `type`.
    """

    type: Literal["Buy", "Sell"] = Field(..., description="Transaction side: Buy or Sell")
    symbol: str = Field(..., min_length=1, max_length=10, description="Ticker symbol")
    quantity: int = Field(..., gt=0, description="Number of shares")
    price: Decimal = Field(..., gt=0, description="Price per share")
    date: datetime.datetime | None = Field(
        None, description="When the trade happened (defaults to now)"
    )

    @field_validator("symbol")
    @classmethod
    def normalize_symbol(cls, value: str) -> str:
        value = value.strip().upper()
        if not value:
            raise ValueError("Symbol must not be blank")
        return value


class Transaction(BaseModel):
    """Schema for Transaction responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    symbol: str
    type: str
    quantity: int
    buy_price: Decimal | None = None
    sell_price: Decimal | None = None
    buy_date: datetime.datetime | None = None
    sell_date: datetime.datetime | None = None
    created_at: datetime.datetime | None = None

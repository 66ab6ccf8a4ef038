"""Holding response schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class HoldingResponse(BaseModel):
    """Computed position for one symbol, optionally with live quote data."""

    symbol: str
    total_quantity: int = Field(..., description="Absolute net shares held")
    avg_price: float = Field(..., description="Weighted average buy price per share")
    total_value: float = Field(..., description="Cost basis of buys")
    last_transaction: datetime
    status: str = Field(..., description="Open or Closed")
    sell_price: float | None = Field(None, description="Price of the first sell")
    buy_date: datetime | None = None
    sell_date: datetime | None = None
    profit_loss: float | None = Field(None, description="Realized P&L, closed holdings only")

    # Display-time enrichment
    current_price: float | None = None
    potential_pl: float | None = Field(None, description="Unrealized P&L, open holdings only")

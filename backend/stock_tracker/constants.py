"""Application constants to avoid magic strings."""


class HoldingStatus:
    """Holding status constants."""

    OPEN = "Open"
    CLOSED = "Closed"


class TransactionType:
    """Transaction side constants accepted by the write path."""

    BUY = "Buy"
    SELL = "Sell"

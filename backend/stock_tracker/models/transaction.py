"""Transaction model - a single buy or sell of a stock."""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.sql import func

from stock_tracker.database import Base

if TYPE_CHECKING:
    from stock_tracker.models.user import User


class Transaction(Base):
    """Transaction model.

    Quantity is signed: positive for a buy, negative for a sell. Buys carry
    buy_price/buy_date only, sells carry sell_price/sell_date only.
    """

    __tablename__ = "transactions"
    __table_args__ = (
        Index("idx_transactions_user", "user_id"),
        Index("idx_transactions_user_symbol", "user_id", "symbol"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"))
    symbol: Mapped[str] = mapped_column(String(20))  # Uppercased at write time
    quantity: Mapped[int] = mapped_column(Integer)
    buy_price: Mapped[Decimal | None] = mapped_column(Numeric(15, 4))
    sell_price: Mapped[Decimal | None] = mapped_column(Numeric(15, 4))
    buy_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    sell_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    created_at: Mapped[datetime] = mapped_column(server_default=func.now())

    # Relationships
    user: Mapped["User"] = relationship(back_populates="transactions")

    @property
    def type(self) -> str:
        return "Buy" if self.quantity > 0 else "Sell"

    @property
    def price(self) -> Decimal | None:
        return self.buy_price if self.buy_price is not None else self.sell_price

    @property
    def date(self) -> datetime | None:
        return self.buy_date or self.sell_date

    def __repr__(self) -> str:
        return (
            f"<Transaction(id={self.id}, symbol='{self.symbol}', "
            f"quantity={self.quantity}, date={self.date})>"
        )

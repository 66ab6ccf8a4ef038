"""Tests for PortfolioService."""

from datetime import datetime
from decimal import Decimal
from unittest.mock import MagicMock

from stock_tracker.constants import HoldingStatus
from stock_tracker.services.market_data.alpha_vantage_client import AlphaVantageClient
from stock_tracker.services.portfolio import PortfolioService
from stock_tracker.services.repositories import TransactionRepository


def seed_transactions(db, user_id: str) -> None:
    repo = TransactionRepository(db)
    repo.create_buy(user_id, "aapl", 10, Decimal("100"), datetime(2024, 1, 10))
    repo.create_sell(user_id, "AAPL", 10, Decimal("120"), datetime(2024, 2, 10))
    repo.create_buy(user_id, "MSFT", 4, Decimal("300"), datetime(2024, 1, 5))
    repo.create_buy(user_id, "MSFT", 6, Decimal("320"), datetime(2024, 3, 1))
    db.commit()


class TestPortfolioService:
    """Test PortfolioService."""

    def test_no_transactions(self, db, test_user):
        service = PortfolioService(db)
        assert service.get_holdings(test_user.id) == []

    def test_get_holdings_from_stored_transactions(self, db, test_user):
        """ORM rows feed the aggregator directly."""
        seed_transactions(db, test_user.id)

        holdings = PortfolioService(db).get_holdings(test_user.id)

        assert [h.symbol for h in holdings] == ["MSFT", "AAPL"]
        msft, aapl = holdings
        assert msft.status == HoldingStatus.OPEN
        assert msft.total_quantity == 10
        assert msft.avg_price == Decimal("312.00")
        assert aapl.status == HoldingStatus.CLOSED
        assert aapl.profit_loss == Decimal("200.00")

    def test_holdings_are_scoped_to_user(self, db, test_user, other_user):
        seed_transactions(db, test_user.id)
        TransactionRepository(db).create_buy(
            other_user.id, "NVDA", 1, Decimal("500"), datetime(2024, 4, 1)
        )
        db.commit()

        mine = PortfolioService(db).get_holdings(test_user.id)
        theirs = PortfolioService(db).get_holdings(other_user.id)

        assert "NVDA" not in [h.symbol for h in mine]
        assert [h.symbol for h in theirs] == ["NVDA"]

    def test_enriched_holdings_quote_only_open_symbols(self, db, test_user):
        seed_transactions(db, test_user.id)
        quote_client = MagicMock(spec=AlphaVantageClient)
        quote_client.get_current_prices.return_value = {"MSFT": Decimal("330.00")}

        enriched = PortfolioService(db, quote_client=quote_client).get_enriched_holdings(
            test_user.id
        )

        quote_client.get_current_prices.assert_called_once_with(["MSFT"])
        msft, aapl = enriched
        assert msft.current_price == Decimal("330.00")
        assert msft.potential_pl == Decimal("180.00")
        assert aapl.current_price is None
        assert aapl.potential_pl is None

    def test_enriched_holdings_without_quote_client(self, db, test_user):
        seed_transactions(db, test_user.id)

        enriched = PortfolioService(db).get_enriched_holdings(test_user.id)

        assert all(e.current_price is None for e in enriched)

    def test_all_closed_skips_quote_lookup(self, db, test_user):
        repo = TransactionRepository(db)
        repo.create_buy(test_user.id, "AAPL", 1, Decimal("10"), datetime(2024, 1, 1))
        repo.create_sell(test_user.id, "AAPL", 1, Decimal("11"), datetime(2024, 1, 2))
        db.commit()
        quote_client = MagicMock(spec=AlphaVantageClient)

        PortfolioService(db, quote_client=quote_client).get_enriched_holdings(test_user.id)

        quote_client.get_current_prices.assert_not_called()

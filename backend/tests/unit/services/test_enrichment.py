"""Tests for display-time holding enrichment."""

from datetime import datetime
from decimal import Decimal

from stock_tracker.constants import HoldingStatus
from stock_tracker.services.portfolio.enrichment import calculate_potential_pl, enrich_holdings
from stock_tracker.services.portfolio.holding_types import HoldingSummary


def make_holding(symbol: str, status: str, quantity: int, avg_price: str) -> HoldingSummary:
    return HoldingSummary(
        symbol=symbol,
        total_quantity=quantity,
        avg_price=Decimal(avg_price),
        total_value=Decimal(avg_price) * quantity,
        last_transaction=datetime(2024, 3, 1),
        status=status,
    )


class TestCalculatePotentialPL:
    """Tests for calculate_potential_pl."""

    def test_open_holding_gain(self):
        holding = make_holding("AAPL", HoldingStatus.OPEN, 10, "100.00")
        assert calculate_potential_pl(holding, Decimal("112.50")) == Decimal("125.00")

    def test_open_holding_loss(self):
        holding = make_holding("AAPL", HoldingStatus.OPEN, 4, "100.00")
        assert calculate_potential_pl(holding, Decimal("90.255")) == Decimal("-38.98")

    def test_closed_holding_has_none(self):
        holding = make_holding("AAPL", HoldingStatus.CLOSED, 0, "100.00")
        assert calculate_potential_pl(holding, Decimal("150")) is None

    def test_missing_price_has_none(self):
        holding = make_holding("AAPL", HoldingStatus.OPEN, 10, "100.00")
        assert calculate_potential_pl(holding, None) is None


class TestEnrichHoldings:
    """Tests for enrich_holdings."""

    def test_attaches_prices_by_symbol(self):
        holdings = [
            make_holding("MSFT", HoldingStatus.OPEN, 2, "300.00"),
            make_holding("AAPL", HoldingStatus.CLOSED, 0, "100.00"),
            make_holding("TSLA", HoldingStatus.OPEN, 1, "200.00"),
        ]
        prices = {"MSFT": Decimal("310.00"), "AAPL": Decimal("150.00")}

        enriched = enrich_holdings(holdings, prices)

        assert [e.holding.symbol for e in enriched] == ["MSFT", "AAPL", "TSLA"]
        msft, aapl, tsla = enriched
        assert msft.current_price == Decimal("310.00")
        assert msft.potential_pl == Decimal("20.00")
        # Closed holdings keep the price but get no potential P&L
        assert aapl.current_price == Decimal("150.00")
        assert aapl.potential_pl is None
        assert tsla.current_price is None
        assert tsla.potential_pl is None

    def test_holdings_are_not_modified(self):
        holding = make_holding("MSFT", HoldingStatus.OPEN, 2, "300.00")
        before = HoldingSummary(**vars(holding))

        enriched = enrich_holdings([holding], {"MSFT": Decimal("1.00")})

        assert enriched[0].holding is holding
        assert holding == before

    def test_empty(self):
        assert enrich_holdings([], {"AAPL": Decimal("1")}) == []

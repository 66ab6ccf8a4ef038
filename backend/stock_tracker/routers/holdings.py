"""Holdings API router - positions derived from the transaction history."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from stock_tracker.database import get_db
from stock_tracker.dependencies.auth import get_current_user
from stock_tracker.dependencies.market_data import get_quote_client
from stock_tracker.models.user import User
from stock_tracker.schemas.common import float_or_none
from stock_tracker.schemas.holding import HoldingResponse
from stock_tracker.services.market_data.alpha_vantage_client import AlphaVantageClient
from stock_tracker.services.portfolio import EnrichedHolding, HoldingSummary, PortfolioService

router = APIRouter(prefix="/api/holdings", tags=["holdings"])


def _to_response(holding: HoldingSummary, enriched: EnrichedHolding | None = None) -> HoldingResponse:
    return HoldingResponse(
        symbol=holding.symbol,
        total_quantity=holding.total_quantity,
        avg_price=float(holding.avg_price),
        total_value=float(holding.total_value),
        last_transaction=holding.last_transaction,
        status=holding.status,
        sell_price=float_or_none(holding.sell_price),
        buy_date=holding.buy_date,
        sell_date=holding.sell_date,
        profit_loss=float_or_none(holding.profit_loss),
        current_price=float_or_none(enriched.current_price) if enriched else None,
        potential_pl=float_or_none(enriched.potential_pl) if enriched else None,
    )


@router.get("", response_model=list[HoldingResponse])
async def list_holdings(
    include_quotes: bool = Query(
        False, description="Attach current price and potential P&L to open holdings"
    ),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
    quote_client: AlphaVantageClient = Depends(get_quote_client),
) -> list[HoldingResponse]:
    """
    Get the current user's holdings, most recently traded first.

    Holdings are recomputed from all transactions on every request.
    With include_quotes, symbols whose quote cannot be fetched simply
    have no current price.
    """
    if not include_quotes:
        service = PortfolioService(db)
        return [_to_response(h) for h in service.get_holdings(current_user.id)]

    service = PortfolioService(db, quote_client=quote_client)
    return [_to_response(e.holding, e) for e in service.get_enriched_holdings(current_user.id)]

"""Market data endpoints - quote lookup, daily history and symbol search."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from stock_tracker.config import settings
from stock_tracker.dependencies.market_data import get_quote_client
from stock_tracker.rate_limiter import limiter
from stock_tracker.schemas.common import float_or_none
from stock_tracker.schemas.market_data import DailyBarResponse, QuoteResponse, SymbolSearchResult
from stock_tracker.services.market_data.alpha_vantage_client import AlphaVantageClient
from stock_tracker.services.shared.http_client import HTTPClientError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/market-data", tags=["market-data"])


@router.get("/quote/{symbol}", response_model=QuoteResponse)
@limiter.limit(settings.quote_rate_limit)
def get_quote(
    request: Request,
    symbol: str,
    quote_client: AlphaVantageClient = Depends(get_quote_client),
) -> QuoteResponse:
    """Get the latest quote for a symbol."""
    try:
        quote = quote_client.get_quote(symbol.upper())
    except HTTPClientError as e:
        logger.warning(f"Quote lookup failed for {symbol}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    if quote is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=f"No quote found for {symbol.upper()}"
        )

    return QuoteResponse(
        symbol=quote.symbol,
        price=float_or_none(quote.price),
        open=float_or_none(quote.open),
        high=float_or_none(quote.high),
        low=float_or_none(quote.low),
        previous_close=float_or_none(quote.previous_close),
        change=float_or_none(quote.change),
        change_percent=quote.change_percent,
        volume=quote.volume,
        latest_trading_day=quote.latest_trading_day,
    )


@router.get("/search", response_model=list[SymbolSearchResult])
@limiter.limit(settings.quote_rate_limit)
def search_symbols(
    request: Request,
    q: str = Query(..., description="Keywords to search for"),
    quote_client: AlphaVantageClient = Depends(get_quote_client),
) -> list[SymbolSearchResult]:
    """Search ticker symbols by keyword."""
    try:
        matches = quote_client.search_symbols(q)
    except HTTPClientError as e:
        logger.warning(f"Symbol search failed for {q!r}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    return [
        SymbolSearchResult(
            symbol=m.symbol,
            name=m.name,
            type=m.type,
            region=m.region,
            currency=m.currency,
            match_score=float_or_none(m.match_score),
        )
        for m in matches
    ]


@router.get("/daily/{symbol}", response_model=list[DailyBarResponse])
@limiter.limit(settings.quote_rate_limit)
def get_daily_history(
    request: Request,
    symbol: str,
    limit: int = Query(30, ge=1, le=100, description="Number of most recent days to return"),
    quote_client: AlphaVantageClient = Depends(get_quote_client),
) -> list[DailyBarResponse]:
    """Get daily adjusted price history for a symbol, most recent first."""
    try:
        bars = quote_client.get_daily_adjusted(symbol.upper())
    except HTTPClientError as e:
        logger.warning(f"Daily history lookup failed for {symbol}: {e}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e)) from e

    if bars is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"No price history found for {symbol.upper()}",
        )

    return [
        DailyBarResponse(
            date=bar.date,
            open=float(bar.open),
            high=float(bar.high),
            low=float(bar.low),
            close=float(bar.close),
            adjusted_close=float(bar.adjusted_close),
            volume=bar.volume,
            dividend_amount=float(bar.dividend_amount),
            split_coefficient=float(bar.split_coefficient),
        )
        for bar in bars[:limit]
    ]

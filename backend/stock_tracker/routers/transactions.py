"""Transactions API router - record, list and delete buys and sells."""

import logging
import math
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from stock_tracker.config import settings
from stock_tracker.constants import TransactionType
from stock_tracker.database import get_db
from stock_tracker.dependencies.auth import get_current_user
from stock_tracker.models import Transaction
from stock_tracker.models.user import User
from stock_tracker.schemas.common import MessageResponse, PaginatedResponse
from stock_tracker.schemas.transaction import Transaction as TransactionSchema
from stock_tracker.schemas.transaction import TransactionCreateRequest
from stock_tracker.services.repositories import TransactionRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/transactions", tags=["transactions"])


def _get_owned_transaction(db: Session, transaction_id: int, user: User) -> Transaction:
    """Fetch a transaction owned by the user, or raise 404."""
    transaction = TransactionRepository(db).find_by_id(transaction_id)
    if not transaction or transaction.user_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Transaction with id {transaction_id} not found",
        )
    return transaction


@router.get("", response_model=PaginatedResponse[TransactionSchema])
async def list_transactions(
    page: int = Query(1, ge=1, description="Page number (1-based)"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Get one page of the current user's transactions, most recent first.

    Page size comes from the `transactions_per_page` setting.
    """
    repo = TransactionRepository(db)
    per_page = settings.transactions_per_page

    total = repo.count_by_user(current_user.id)
    transactions = repo.find_page_by_user(current_user.id, page=page, per_page=per_page)

    return PaginatedResponse[TransactionSchema](
        items=[TransactionSchema.model_validate(t) for t in transactions],
        page=page,
        per_page=per_page,
        total=total,
        total_pages=math.ceil(total / per_page),
    )


@router.get("/{transaction_id}", response_model=TransactionSchema)
async def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get a specific transaction by ID (must belong to the current user)."""
    return _get_owned_transaction(db, transaction_id, current_user)


@router.post("", response_model=TransactionSchema, status_code=status.HTTP_201_CREATED)
async def create_transaction(
    transaction: TransactionCreateRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """
    Record a buy or a sell for the current user.

    Business Logic:
    - Buy: stored with positive quantity, buy price and buy date
    - Sell: stored with negative quantity, sell price and sell date
    - Selling more than is held is accepted
    """
    repo = TransactionRepository(db)
    when = transaction.date or datetime.now(UTC)

    if transaction.type == TransactionType.BUY:
        db_transaction = repo.create_buy(
            current_user.id, transaction.symbol, transaction.quantity, transaction.price, when
        )
    else:
        db_transaction = repo.create_sell(
            current_user.id, transaction.symbol, transaction.quantity, transaction.price, when
        )

    db.commit()
    db.refresh(db_transaction)
    return db_transaction


@router.delete("/{transaction_id}", response_model=MessageResponse)
async def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Delete a transaction (must belong to the current user)."""
    transaction = _get_owned_transaction(db, transaction_id, current_user)

    TransactionRepository(db).delete(transaction)
    db.commit()

    return MessageResponse(message=f"Transaction {transaction_id} deleted")

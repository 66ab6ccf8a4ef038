"""Acting-user dependency for user-scoped routes.

Authentication itself is handled upstream; requests arrive with the caller's
user id in the X-User-Id header.
"""

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from stock_tracker.database import get_db
from stock_tracker.models.user import User
from stock_tracker.services.repositories.user_repository import UserRepository

USER_ID_HEADER = "X-User-Id"


def get_current_user(
    user_id: str | None = Header(None, alias=USER_ID_HEADER),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the acting user from the X-User-Id header.

    Usage:
        @router.get("/mine")
        def my_route(user: User = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="You must be logged in",
        )

    user = UserRepository(db).find_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )

    return user

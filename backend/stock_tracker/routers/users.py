"""Users API router."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from stock_tracker.database import get_db
from stock_tracker.dependencies.auth import get_current_user
from stock_tracker.models.user import User
from stock_tracker.schemas.user import User as UserSchema
from stock_tracker.schemas.user import UserCreate
from stock_tracker.services.repositories import DuplicateError, UserRepository

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserSchema, status_code=status.HTTP_201_CREATED)
async def create_user(
    user: UserCreate,
    db: Session = Depends(get_db),
):
    """Register a new user."""
    try:
        db_user = UserRepository(db).create(email=user.email, name=user.name)
    except DuplicateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e

    db.commit()
    db.refresh(db_user)
    return db_user


@router.get("/me", response_model=UserSchema)
async def get_me(current_user: User = Depends(get_current_user)):
    """Get the current user."""
    return current_user

"""Pydantic schemas for User model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    """Schema for registering a user."""

    email: EmailStr
    name: str | None = Field(None, max_length=255)


class User(BaseModel):
    """Schema for User responses."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str | None = None
    created_at: datetime | None = None

"""Common response schemas used across the API."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PaginatedResponse(BaseModel, Generic[T]):
    """Page-numbered response wrapper.

    Attributes:
        items: List of items for the current page
        page: 1-based page number
        per_page: Maximum items per page
        total: Total number of items across all pages
        total_pages: Number of pages
    """

    items: list[T]
    page: int = Field(..., description="Current page (1-based)")
    per_page: int = Field(..., description="Maximum items per page")
    total: int = Field(..., description="Total number of items")
    total_pages: int = Field(..., description="Total number of pages")


class MessageResponse(BaseModel):
    """Simple message response for operations that return only a message."""

    message: str


def float_or_none(value) -> float | None:
    """Convert a Decimal (or None) for JSON responses."""
    return float(value) if value is not None else None

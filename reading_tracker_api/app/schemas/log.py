"""
Pydantic models for reading logs.
"""

from pydantic import BaseModel, Field


class LogRead(BaseModel):
    """Schema for reading a reading log from the API."""

    id: int
    book_id: int = Field(..., alias="bookId")
    date: str = Field(..., examples=["2024-01-01"])
    pages_read: int = Field(..., alias="pagesRead", examples=[25])
    created_at: str = Field(..., alias="createdAt")

    model_config = {
        "populate_by_name": True,
    }

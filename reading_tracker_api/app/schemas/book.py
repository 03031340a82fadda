"""
Pydantic models for book data.

``BookRead`` is the public projection of a stored book.  Only the
fields listed here ever leave the service layer, so internal fields
added to the store later are not leaked to clients.

``BookPatch`` describes a partial update.  Field values are left
untyped because the merged result is checked by the book validator;
the model only records which keys the client actually sent
(``model_fields_set``), so an explicit ``null`` or ``""`` is kept
apart from an absent key.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class BookRead(BaseModel):
    """Schema for reading a book from the API."""

    id: int
    title: str
    author: Optional[str] = None
    total_pages: int = Field(..., alias="totalPages", examples=[320])
    created_at: str = Field(..., alias="createdAt", examples=["2024-01-01T10:00:00.000Z"])
    updated_at: str = Field(..., alias="updatedAt", examples=["2024-01-01T10:00:00.000Z"])

    model_config = {
        "populate_by_name": True,
    }


class BookPatch(BaseModel):
    """Schema for a partial book update.

    All fields are optional; only provided keys replace stored values.
    """

    title: Any = None
    author: Any = None
    total_pages: Any = Field(None, alias="totalPages")

    model_config = {
        "populate_by_name": True,
    }

    def provided(self) -> dict:
        """Return the keys the client sent, under their wire names."""
        return self.model_dump(by_alias=True, exclude_unset=True)

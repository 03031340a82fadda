"""
Pydantic models for generic items.

Items are a plain name/id pair kept for the front‑end's smoke tests.
The name is stored exactly as the client sent it, so it is not typed.
"""

from typing import Any

from pydantic import BaseModel, Field


class ItemRead(BaseModel):
    id: int
    name: Any = Field(None, examples=["Test item"])

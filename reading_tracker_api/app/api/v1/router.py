"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under their path prefixes.
"""

from fastapi import APIRouter

from .endpoints import books, items

router = APIRouter()

router.include_router(items.router, prefix="/items", tags=["items"])
# Reading logs are nested under their book, so the books router serves
# both ``/books`` and ``/books/{book_id}/logs``.
router.include_router(books.router, prefix="/books", tags=["books"])

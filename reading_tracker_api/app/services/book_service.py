"""
Service layer for books.

This module validates book payloads, applies them to the in‑memory
store and projects stored records to ``BookRead``.  Deleting a book
also deletes its reading logs; both removals happen under the store
lock, so no caller ever sees logs that point to a deleted book.

Updates are partial.  A key present in the request body replaces the
stored value, even when it is ``null`` or an empty string.  A key
that is absent keeps the stored value.  The merged book is then
validated exactly like a new one.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, List

from reading_tracker_api.app.core.store import BookRecord, get_store
from reading_tracker_api.app.core.timeutils import utc_timestamp
from reading_tracker_api.app.schemas.book import BookPatch, BookRead
from reading_tracker_api.app.services.exceptions import NotFoundError, ValidationError
from reading_tracker_api.app.services.validation import (
    ALLOWED_BOOK_FIELDS,
    VALIDATION_ERRORS,
    validate_book_payload,
)

BOOK_NOT_FOUND = "Book not found"
TOTAL_PAGES_BELOW_READ = "totalPages cannot be less than total pages already read"


class BookService:
    """Service class for managing books."""

    @classmethod
    async def list_books(cls) -> List[BookRead]:
        """Return every book in creation order."""
        return [cls.format_book_response(book) for book in get_store().list_books()]

    @classmethod
    async def create_book(cls, payload: Any) -> BookRead:
        """Validate ``payload`` and store a new book.

        The title is trimmed and a missing author becomes ``None``.
        ``createdAt`` and ``updatedAt`` receive the same timestamp.
        Raises ``ValidationError`` when the payload is rejected.
        """
        logger = logging.getLogger(__name__)
        result = validate_book_payload(payload)
        if not result.valid:
            logger.info("Rejected book payload: %s", result.message)
            raise ValidationError(result.message)

        store = get_store()
        timestamp = utc_timestamp()
        book = BookRecord(
            id=store.next_id("book"),
            title=payload["title"].strip(),
            author=payload.get("author"),
            total_pages=int(payload["totalPages"]),
            created_at=timestamp,
            updated_at=timestamp,
        )
        store.insert_book(book)
        logger.info("Created book %s", book.id)
        return cls.format_book_response(book)

    @classmethod
    async def update_book(cls, book_id: int, payload: Any) -> BookRead:
        """Merge ``payload`` into the stored book and return the result.

        Raises ``NotFoundError`` if the book does not exist and
        ``ValidationError`` if the payload carries unknown keys, the
        merged book is invalid, or the new ``totalPages`` is lower than
        the pages already logged for it.
        """
        logger = logging.getLogger(__name__)
        store = get_store()
        with store.lock:
            current = store.find_book_by_id(book_id)
            if current is None:
                raise NotFoundError(BOOK_NOT_FOUND)

            if not isinstance(payload, dict):
                raise ValidationError(VALIDATION_ERRORS["payload"])
            if any(key not in ALLOWED_BOOK_FIELDS for key in payload):
                raise ValidationError(VALIDATION_ERRORS["extra"])

            patch = BookPatch.model_validate(payload)
            candidate = {
                "title": current.title,
                "author": current.author,
                "totalPages": current.total_pages,
            }
            candidate.update(patch.provided())

            result = validate_book_payload(candidate)
            if not result.valid:
                logger.info("Rejected update for book %s: %s", book_id, result.message)
                raise ValidationError(result.message)

            total_pages = int(candidate["totalPages"])
            if total_pages < store.sum_pages_read_for_book(book_id):
                logger.info("Rejected update for book %s: %s", book_id, TOTAL_PAGES_BELOW_READ)
                raise ValidationError(TOTAL_PAGES_BELOW_READ)

            author = candidate["author"]
            updated = dataclasses.replace(
                current,
                title=candidate["title"].strip(),
                author=author.strip() if author is not None else None,
                total_pages=total_pages,
                updated_at=utc_timestamp(),
            )
            store.update_book(book_id, updated)
        logger.info("Updated book %s (fields: %s)", book_id, ", ".join(sorted(patch.provided())) or "none")
        return cls.format_book_response(updated)

    @classmethod
    async def delete_book(cls, book_id: int) -> None:
        """Delete a book and all of its reading logs.

        Raises ``NotFoundError`` if the book does not exist.
        """
        logger = logging.getLogger(__name__)
        store = get_store()
        with store.lock:
            if not store.delete_book(book_id):
                raise NotFoundError(BOOK_NOT_FOUND)
            removed_logs = store.delete_logs_for_book(book_id)
        logger.info("Deleted book %s and %d reading logs", book_id, removed_logs)

    @staticmethod
    def format_book_response(book: BookRecord) -> BookRead:
        """Project a stored book onto its public fields."""
        return BookRead(
            id=book.id,
            title=book.title,
            author=book.author,
            total_pages=book.total_pages,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )

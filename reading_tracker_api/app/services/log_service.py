"""
Service layer for reading logs.

A reading log records how many pages of one book were read on one
calendar day.  Two rules are enforced when a log is created:

* a book has at most one log per date;
* the pages logged for a book never add up to more than its
  ``totalPages``.

Both are check‑then‑act rules, so the checks and the insert run under
the store lock.  The pages total is recomputed from the stored logs on
every call rather than cached.
"""

from __future__ import annotations

import logging
from typing import Any, List

from reading_tracker_api.app.core.store import LogRecord, get_store
from reading_tracker_api.app.core.timeutils import utc_timestamp
from reading_tracker_api.app.schemas.log import LogRead
from reading_tracker_api.app.services.book_service import BOOK_NOT_FOUND
from reading_tracker_api.app.services.exceptions import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from reading_tracker_api.app.services.validation import validate_log_payload

DUPLICATE_DATE = "A reading log already exists for this date"
PAGES_CEILING = "Total pages read cannot exceed totalPages"


class LogService:
    """Service class for reading logs."""

    @classmethod
    async def list_logs_for_book(cls, book_id: int) -> List[LogRead]:
        """Return the book's logs ordered by date ascending.

        Raises ``NotFoundError`` if the book does not exist.
        """
        store = get_store()
        with store.lock:
            if store.find_book_by_id(book_id) is None:
                raise NotFoundError(BOOK_NOT_FOUND)
            logs = store.list_logs_for_book(book_id)
        return [cls.format_log_response(log) for log in logs]

    @classmethod
    async def create_log(cls, book_id: int, payload: Any) -> LogRead:
        """Create a reading log for ``book_id``.

        Checks run in this order: the book exists (``NotFoundError``),
        the payload is valid (``ValidationError``), no log exists for
        the date yet (``ConflictError``), and the new pages keep the
        total within ``totalPages`` (``ValidationError``).  Reaching
        ``totalPages`` exactly is allowed.
        """
        logger = logging.getLogger(__name__)
        store = get_store()
        with store.lock:
            book = store.find_book_by_id(book_id)
            if book is None:
                raise NotFoundError(BOOK_NOT_FOUND)

            result = validate_log_payload(payload)
            if not result.valid:
                logger.info("Rejected log payload for book %s: %s", book_id, result.message)
                raise ValidationError(result.message)

            date = payload["date"]
            pages_read = int(payload["pagesRead"])

            if store.find_log_by_date(book_id, date) is not None:
                logger.info("Duplicate log for book %s on %s", book_id, date)
                raise ConflictError(DUPLICATE_DATE)

            current_total = store.sum_pages_read_for_book(book_id)
            if current_total + pages_read > book.total_pages:
                logger.info(
                    "Log for book %s would reach %d of %d pages",
                    book_id,
                    current_total + pages_read,
                    book.total_pages,
                )
                raise ValidationError(PAGES_CEILING)

            log = LogRecord(
                id=store.next_id("log"),
                book_id=book_id,
                date=date,
                pages_read=pages_read,
                created_at=utc_timestamp(),
            )
            store.insert_log(log)
        logger.info("Created reading log %s for book %s", log.id, book_id)
        return cls.format_log_response(log)

    @staticmethod
    def format_log_response(log: LogRecord) -> LogRead:
        return LogRead(
            id=log.id,
            book_id=log.book_id,
            date=log.date,
            pages_read=log.pages_read,
            created_at=log.created_at,
        )

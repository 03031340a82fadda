"""
In‑memory storage for books, reading logs and items.

The ``InMemoryStore`` is the single source of truth while the process
is running.  Nothing is persisted: a restart starts again from the
two seed items and no books.

Every collection is a plain list kept in insertion order.  Identifiers
come from an injected factory (``itertools.count`` by default), one
independent counter per collection.

The store itself performs no validation and enforces no cross‑entity
rules.  Services hold ``store.lock`` across each check‑then‑act
sequence (for example "no log for this date yet, then insert"), which
keeps the invariants intact if requests are ever served from several
threads.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)

SEED_ITEM_NAMES = ["Test item 5", "Test item 2"]


@dataclass
class BookRecord:
    id: int
    title: str
    author: Optional[str]
    total_pages: int
    created_at: str
    updated_at: str


@dataclass
class LogRecord:
    id: int
    book_id: int
    date: str
    pages_read: int
    created_at: str


@dataclass
class ItemRecord:
    id: int
    name: Any


def default_id_factory() -> Iterator[int]:
    return itertools.count(1)


class InMemoryStore:
    """Process‑local collections of books, logs and items."""

    def __init__(self, id_factory: Callable[[], Iterator[int]] = default_id_factory) -> None:
        self._id_factory = id_factory
        self.lock = threading.RLock()
        self.reset()

    def reset(self) -> None:
        """Drop all data and restore the start‑up state."""
        with self.lock:
            self._counters: Dict[str, Iterator[int]] = {
                "book": self._id_factory(),
                "log": self._id_factory(),
                "item": self._id_factory(),
            }
            self.books: List[BookRecord] = []
            self.logs: List[LogRecord] = []
            self.items: List[ItemRecord] = []
            for name in SEED_ITEM_NAMES:
                self.insert_item(ItemRecord(id=self.next_id("item"), name=name))
        logger.debug("Store reset with %d seed items", len(self.items))

    def next_id(self, kind: str) -> int:
        """Return the next identifier for ``kind`` (``book``, ``log`` or ``item``)."""
        with self.lock:
            return next(self._counters[kind])

    # ------------------------------------------------------------------
    # Books
    # ------------------------------------------------------------------
    def insert_book(self, book: BookRecord) -> None:
        with self.lock:
            self.books.append(book)

    def find_book_by_id(self, book_id: int) -> Optional[BookRecord]:
        with self.lock:
            for book in self.books:
                if book.id == book_id:
                    return book
            return None

    def find_book_index(self, book_id: int) -> Optional[int]:
        with self.lock:
            for index, book in enumerate(self.books):
                if book.id == book_id:
                    return index
            return None

    def update_book(self, book_id: int, new_book: BookRecord) -> bool:
        """Replace the stored book with ``new_book``.

        Returns ``False`` when no book with ``book_id`` exists.
        """
        with self.lock:
            index = self.find_book_index(book_id)
            if index is None:
                return False
            self.books[index] = new_book
            return True

    def delete_book(self, book_id: int) -> bool:
        """Remove the book only.  Its logs are removed by ``delete_logs_for_book``."""
        with self.lock:
            index = self.find_book_index(book_id)
            if index is None:
                return False
            del self.books[index]
            return True

    def list_books(self) -> List[BookRecord]:
        with self.lock:
            return list(self.books)

    # ------------------------------------------------------------------
    # Reading logs
    # ------------------------------------------------------------------
    def insert_log(self, log: LogRecord) -> None:
        with self.lock:
            self.logs.append(log)

    def find_log_index(self, log_id: int) -> Optional[int]:
        with self.lock:
            for index, log in enumerate(self.logs):
                if log.id == log_id:
                    return index
            return None

    def find_log_by_date(self, book_id: int, date: str) -> Optional[LogRecord]:
        with self.lock:
            for log in self.logs:
                if log.book_id == book_id and log.date == date:
                    return log
            return None

    def list_logs_for_book(self, book_id: int) -> List[LogRecord]:
        """Return the book's logs ordered by ``date`` ascending.

        Dates are fixed‑width ``YYYY-MM-DD`` strings, so string order is
        calendar order.
        """
        with self.lock:
            return sorted((log for log in self.logs if log.book_id == book_id), key=lambda log: log.date)

    def delete_logs_for_book(self, book_id: int) -> int:
        """Remove every log of ``book_id`` and return how many were removed."""
        with self.lock:
            remaining = [log for log in self.logs if log.book_id != book_id]
            removed = len(self.logs) - len(remaining)
            self.logs = remaining
            return removed

    def sum_pages_read_for_book(self, book_id: int) -> int:
        with self.lock:
            return sum(log.pages_read for log in self.logs if log.book_id == book_id)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def insert_item(self, item: ItemRecord) -> None:
        with self.lock:
            self.items.append(item)

    def find_item_by_id(self, item_id: int) -> Optional[ItemRecord]:
        with self.lock:
            for item in self.items:
                if item.id == item_id:
                    return item
            return None

    def list_items(self) -> List[ItemRecord]:
        with self.lock:
            return list(self.items)

    def delete_item(self, item_id: int) -> bool:
        with self.lock:
            remaining = [item for item in self.items if item.id != item_id]
            deleted = len(remaining) != len(self.items)
            self.items = remaining
            return deleted


_store = InMemoryStore()


def get_store() -> InMemoryStore:
    """Return the process‑wide store instance."""
    return _store

"""
Book and reading log endpoints for API v1.

Request bodies are taken as raw JSON and handed to the services
untouched, because the services own the validation rules (field
whitelists, error messages).  Service errors are mapped to status
codes by ``to_http_exception``:

- ``ValidationError`` → 400
- ``NotFoundError`` → 404
- ``ConflictError`` → 409
"""

from typing import Any, List

from fastapi import APIRouter, Body, status

from reading_tracker_api.app.api.errors import to_http_exception
from reading_tracker_api.app.schemas.book import BookRead
from reading_tracker_api.app.schemas.log import LogRead
from reading_tracker_api.app.services.book_service import BookService
from reading_tracker_api.app.services.exceptions import ServiceError
from reading_tracker_api.app.services.log_service import LogService

router = APIRouter()


@router.get("", response_model=List[BookRead])
async def list_books() -> List[BookRead]:
    """Return all books in creation order."""
    return await BookService.list_books()


@router.post("", response_model=BookRead, status_code=status.HTTP_201_CREATED)
async def create_book(payload: Any = Body(None)) -> BookRead:
    """Create a book from ``{title, totalPages, author?}``.

    Unknown fields are rejected with 400.
    """
    try:
        return await BookService.create_book(payload)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.patch("/{book_id}", response_model=BookRead)
async def update_book(book_id: int, payload: Any = Body(None)) -> BookRead:
    """Partially update a book.

    Keys present in the body replace the stored values; absent keys
    are left unchanged.  Returns 404 if the book does not exist.
    """
    try:
        return await BookService.update_book(book_id, payload)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.delete("/{book_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_book(book_id: int) -> None:
    """Delete a book together with its reading logs."""
    try:
        await BookService.delete_book(book_id)
    except ServiceError as e:
        raise to_http_exception(e) from e
    return None


@router.get("/{book_id}/logs", response_model=List[LogRead])
async def list_logs(book_id: int) -> List[LogRead]:
    """Return the book's reading logs ordered by date ascending."""
    try:
        return await LogService.list_logs_for_book(book_id)
    except ServiceError as e:
        raise to_http_exception(e) from e


@router.post("/{book_id}/logs", response_model=LogRead, status_code=status.HTTP_201_CREATED)
async def create_log(book_id: int, payload: Any = Body(None)) -> LogRead:
    """Record pages read for a book on a date.

    Returns 409 if a log already exists for that date and 400 if the
    pages would take the book past its ``totalPages``.
    """
    try:
        return await LogService.create_log(book_id, payload)
    except ServiceError as e:
        raise to_http_exception(e) from e

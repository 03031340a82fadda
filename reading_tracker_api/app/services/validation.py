"""
Payload validation for books and reading logs.

Both validators are pure functions: they inspect a decoded JSON body
and return a ``ValidationResult`` without touching any state.  Keys
outside the whitelist cause rejection instead of being dropped, so a
client sending a misspelled field finds out immediately.
"""

import calendar
import re
from dataclasses import dataclass
from typing import Any, Optional

ALLOWED_BOOK_FIELDS = ("title", "author", "totalPages")
ALLOWED_LOG_FIELDS = ("date", "pagesRead")

DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")

VALIDATION_ERRORS = {
    "payload": "Invalid payload",
    "extra": "Unexpected fields in payload",
    "title": "title is required and must be a non-empty string",
    "totalPages": "totalPages is required and must be a positive integer",
    "author": "author must be a string if provided",
    "date": "date is required and must be a valid date in YYYY-MM-DD format",
    "pagesRead": "pagesRead is required and must be a positive integer",
}


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    message: Optional[str] = None


VALID = ValidationResult(valid=True)


def _invalid(key: str) -> ValidationResult:
    return ValidationResult(valid=False, message=VALIDATION_ERRORS[key])


def is_positive_integer(value: Any) -> bool:
    """
    Checks that a decoded JSON value is an integer greater than zero

    Booleans are rejected even though ``bool`` subclasses ``int``.  An
    integral float such as ``12.0`` is accepted, since JSON has a
    single number type.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, float):
        return value.is_integer() and value > 0
    return False


def is_calendar_date(value: Any) -> bool:
    """
    Checks for a real calendar date written as ``YYYY-MM-DD``

    Parameters
    ----------
    value : Any
        Candidate date string.

    Returns
    -------
    bool
        True if ``value`` has the fixed‑width format and names a day
        that exists (``2024-02-29`` passes, ``2024-02-30`` does not).
        Years run from ``0000`` to ``9999`` on the proleptic Gregorian
        calendar, so ``0000`` is a leap year.

    """
    if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
        return False
    year, month, day = (int(part) for part in value.split("-"))
    if not 1 <= month <= 12:
        return False
    days_in_month = calendar.mdays[month] + (1 if month == 2 and calendar.isleap(year) else 0)
    return 1 <= day <= days_in_month


def _has_unexpected_fields(payload: dict, allowed) -> bool:
    return any(key not in allowed for key in payload)


def validate_book_payload(payload: Any) -> ValidationResult:
    """
    Validates a full book payload (creation, or a merged update)

    Parameters
    ----------
    payload : Any
        Decoded JSON body.

    Returns
    -------
    ValidationResult
        ``valid`` is True when the payload is acceptable, otherwise
        ``message`` names the first rule that failed.

    """
    if not isinstance(payload, dict):
        return _invalid("payload")
    if _has_unexpected_fields(payload, ALLOWED_BOOK_FIELDS):
        return _invalid("extra")

    title = payload.get("title")
    if not isinstance(title, str) or title.strip() == "":
        return _invalid("title")

    if not is_positive_integer(payload.get("totalPages")):
        return _invalid("totalPages")

    author = payload.get("author")
    if author is not None and not isinstance(author, str):
        return _invalid("author")

    return VALID


def validate_log_payload(payload: Any) -> ValidationResult:
    """
    Validates a reading log payload

    Parameters
    ----------
    payload : Any
        Decoded JSON body.

    Returns
    -------
    ValidationResult
        ``valid`` is True when the payload is acceptable, otherwise
        ``message`` names the first rule that failed.

    """
    if not isinstance(payload, dict):
        return _invalid("payload")
    if _has_unexpected_fields(payload, ALLOWED_LOG_FIELDS):
        return _invalid("extra")

    if not is_calendar_date(payload.get("date")):
        return _invalid("date")

    if not is_positive_integer(payload.get("pagesRead")):
        return _invalid("pagesRead")

    return VALID

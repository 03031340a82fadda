import pytest

from reading_tracker_api.app.services.validation import (
    VALIDATION_ERRORS,
    is_calendar_date,
    is_positive_integer,
    validate_book_payload,
    validate_log_payload,
)


def test_valid_book_payload():
    result = validate_book_payload({"title": "Dune", "totalPages": 412, "author": "Frank Herbert"})
    assert result.valid
    assert result.message is None


def test_book_author_may_be_absent_or_null():
    assert validate_book_payload({"title": "Dune", "totalPages": 412}).valid
    assert validate_book_payload({"title": "Dune", "totalPages": 412, "author": None}).valid


@pytest.mark.parametrize("payload", [None, [], "title", 42])
def test_book_payload_must_be_object(payload):
    result = validate_book_payload(payload)
    assert not result.valid
    assert result.message == "Invalid payload"


@pytest.mark.parametrize("extra", ["isbn", "id", "total_pages", "createdAt"])
def test_book_payload_rejects_unexpected_fields(extra):
    result = validate_book_payload({"title": "Dune", "totalPages": 10, extra: "x"})
    assert not result.valid
    assert result.message == "Unexpected fields in payload"


def test_unexpected_fields_checked_before_other_rules():
    result = validate_book_payload({"bogus": True})
    assert result.message == "Unexpected fields in payload"


@pytest.mark.parametrize("title", [None, "", "   ", 12, ["Dune"]])
def test_book_title_rules(title):
    result = validate_book_payload({"title": title, "totalPages": 10})
    assert not result.valid
    assert result.message == VALIDATION_ERRORS["title"]


@pytest.mark.parametrize("total_pages", [None, 0, -5, 1.5, "100", True])
def test_book_total_pages_rules(total_pages):
    result = validate_book_payload({"title": "Dune", "totalPages": total_pages})
    assert not result.valid
    assert result.message == VALIDATION_ERRORS["totalPages"]


def test_book_total_pages_missing():
    result = validate_book_payload({"title": "Dune"})
    assert result.message == VALIDATION_ERRORS["totalPages"]


def test_book_author_must_be_string():
    result = validate_book_payload({"title": "Dune", "totalPages": 10, "author": 7})
    assert not result.valid
    assert result.message == "author must be a string if provided"


def test_valid_log_payload():
    assert validate_log_payload({"date": "2024-01-01", "pagesRead": 10}).valid


def test_log_accepts_leap_day():
    assert validate_log_payload({"date": "2024-02-29", "pagesRead": 1}).valid


@pytest.mark.parametrize(
    "date",
    ["2024-02-30", "2023-02-29", "2024-13-01", "2024-1-01", "24-01-01", "2024/01/01", "2024-01-01T00:00:00", "", None, 20240101],
)
def test_log_rejects_bad_dates(date):
    result = validate_log_payload({"date": date, "pagesRead": 1})
    assert not result.valid
    assert result.message == VALIDATION_ERRORS["date"]


@pytest.mark.parametrize("pages", [None, 0, -1, 2.5, "3", False])
def test_log_pages_read_rules(pages):
    result = validate_log_payload({"date": "2024-01-01", "pagesRead": pages})
    assert not result.valid
    assert result.message == VALIDATION_ERRORS["pagesRead"]


def test_log_rejects_unexpected_fields():
    result = validate_log_payload({"date": "2024-01-01", "pagesRead": 1, "bookId": 3})
    assert result.message == "Unexpected fields in payload"


def test_log_payload_must_be_object():
    assert validate_log_payload(None).message == "Invalid payload"


def test_positive_integer_helper():
    assert is_positive_integer(1)
    assert is_positive_integer(12.0)
    assert not is_positive_integer(True)
    assert not is_positive_integer(0)


def test_calendar_date_helper():
    assert is_calendar_date("2000-02-29")
    assert not is_calendar_date("1900-02-29")
    assert not is_calendar_date("2024-04-31")
    assert not is_calendar_date("2024-01-00")
    assert is_calendar_date("2024-12-31")
    # Non-ASCII digits must not slip through the pattern
    assert not is_calendar_date("２０２４-01-01")


def test_year_zero_is_a_leap_year():
    assert is_calendar_date("0000-01-01")
    assert is_calendar_date("0000-02-29")
    assert validate_log_payload({"date": "0000-01-01", "pagesRead": 1}).valid

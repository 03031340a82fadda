"""
Errors raised by the service layer.

All of them derive from ``ValueError`` so callers that only care about
"the request could not be honoured" can catch that.  The API layer
maps each subclass to its own status code.
"""


class ServiceError(ValueError):
    """Base class for expected, client‑caused failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    """The payload is malformed or breaks a domain rule."""


class NotFoundError(ServiceError):
    """The addressed book or item does not exist."""


class ConflictError(ServiceError):
    """The request clashes with existing state (e.g. a second log for one date)."""

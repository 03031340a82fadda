"""
Application package initializer.

The project is organised into small layers: ``core`` holds settings,
logging and the in‑memory store, ``services`` holds the business
rules for books, reading logs and items, ``schemas`` holds the
Pydantic response models and ``api`` exposes the HTTP routes.
"""

from .main import app  # noqa: F401

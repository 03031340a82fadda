"""
Pydantic schema definitions for API payloads.

Response models use Python attribute names internally and camelCase
aliases on the wire (``totalPages``, ``bookId``), matching the JSON
contract used by the browser client.
"""

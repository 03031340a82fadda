from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Current UTC time as ISO‑8601 with millisecond precision, e.g. ``2024-01-01T10:00:00.000Z``."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

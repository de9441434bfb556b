from datetime import datetime, timezone


def utc_timestamp() -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2025-01-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

# backend/projectplan/utils/timestamps.py
from datetime import datetime, timezone


def utc_now() -> str:
    """Current UTC time as ISO-8601 text with millisecond precision, e.g. 2024-05-01T12:00:00.000Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

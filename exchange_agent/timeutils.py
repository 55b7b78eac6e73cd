"""Timestamp helpers shared by protocol objects and tools."""
from datetime import datetime, timezone


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a trailing Z."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

"""simcore.core.time

The only time helper surface in the codebase.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, time


def parse_dt(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime string into an aware UTC datetime.

    Accepts:
    - `Z` suffix
    - explicit offsets
    - naive timestamps and bare dates (assumed UTC)

    Raises:
        ValueError: if parsing fails.
    """

    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"

    dt = datetime.fromisoformat(v)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def as_utc(value: datetime | date | str) -> datetime:
    """Coerce a datetime, date, or ISO string into an aware UTC datetime."""

    if isinstance(value, str):
        return parse_dt(value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value.astimezone(UTC)
    return datetime.combine(value, time(), tzinfo=UTC)


def day_key(value: datetime) -> str:
    """Calendar day of a timestamp as ``YYYY-MM-DD``."""

    return value.date().isoformat()

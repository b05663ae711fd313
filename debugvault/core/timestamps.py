"""Timestamps: lenient parsing of store timestamps into comparable UTC datetimes.

Invariants:
    - Every returned datetime is timezone-aware UTC
    - A value without a zone is taken as UTC; a bare date is midnight UTC
    - parse_timestamp never raises: unparseable input returns None
"""

from datetime import date, datetime, timezone


def parse_timestamp(value: object) -> datetime | None:
    """Normalize a datetime, date or ISO-8601 string to aware UTC, or None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """Render a timestamp for human-readable exports."""
    return value.astimezone(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC")

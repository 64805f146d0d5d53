"""Timestamp parsing and inclusive date-range helpers."""

from datetime import date, datetime, timedelta, timezone

DATE_FORMAT = "%Y-%m-%d"

DEFAULT_DAYS = 7


def parse_timestamp(value) -> datetime | None:
    """Parse an RFC3339 timestamp ("2026-02-13T12:00:00.000Z").

    Returns None for anything that is not a string with an explicit UTC offset.
    """
    if not isinstance(value, str) or not value:
        return None
    try:
        ts = datetime.fromisoformat(value.replace("Z", "+00:00").replace("z", "+00:00"))
    except ValueError:
        return None
    if ts.tzinfo is None:
        return None
    return ts


def date_key(ts: datetime) -> str:
    """Calendar date of a timestamp in its own UTC offset."""
    return ts.strftime(DATE_FORMAT)


def parse_date(value: str) -> datetime:
    """Parse YYYY-MM-DD into midnight UTC. Raises ValueError on bad input."""
    return datetime.strptime(value, DATE_FORMAT).replace(tzinfo=timezone.utc)


def end_of_day(day: datetime) -> datetime:
    """Last representable instant of the given day, for inclusive upper bounds."""
    return day + timedelta(days=1) - timedelta(microseconds=1)


def default_since(days: int = DEFAULT_DAYS, today: date | None = None) -> datetime:
    """Start of a trailing window of `days` calendar days ending today (UTC)."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    start = today - timedelta(days=max(days, 1) - 1)
    return datetime(start.year, start.month, start.day, tzinfo=timezone.utc)


def in_range(ts: datetime, since: datetime | None, until: datetime | None) -> bool:
    """Both bounds are inclusive; a None bound is open."""
    if since is not None and ts < since:
        return False
    if until is not None and ts > until:
        return False
    return True

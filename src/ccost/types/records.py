"""Deduplicated usage records and per-day session spans."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True)
class Record:
    time: datetime
    model: str
    project: str
    input: int = 0
    output: int = 0
    cache_write: int = 0
    cache_read: int = 0


@dataclass(frozen=True)
class Session:
    """Time spent in one main session file on a single calendar day.

    A file spanning several days produces one Session per day.
    """
    date: str  # YYYY-MM-DD
    project: str
    duration: timedelta = timedelta(0)

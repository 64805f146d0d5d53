"""Aggregate usage records into report rows grouped by date or project."""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import Callable

from ccost.types.records import Record, Session
from ccost.types.reports import TOTAL_KEY, UNKNOWN_COST, Report, Row
from ccost.utils.date_range import date_key
from ccost.utils.pricing import calculate_cost


def by_date(records: list[Record], sessions: list[Session]) -> Report:
    """Group records by date, merging all models."""
    return aggregate(records, sessions, _record_date, _session_date, detailed=False)


def by_date_detailed(records: list[Record], sessions: list[Session]) -> Report:
    """Group records by date and model."""
    return aggregate(records, sessions, _record_date, _session_date, detailed=True)


def by_project(records: list[Record], sessions: list[Session]) -> Report:
    """Group records by project, merging all models."""
    return aggregate(records, sessions, _record_project, _session_project, detailed=False)


def by_project_detailed(records: list[Record], sessions: list[Session]) -> Report:
    """Group records by project and model."""
    return aggregate(records, sessions, _record_project, _session_project, detailed=True)


def build_report(
    records: list[Record],
    sessions: list[Session],
    group_by_project: bool = False,
    detailed: bool = False,
) -> Report:
    if group_by_project:
        return by_project_detailed(records, sessions) if detailed else by_project(records, sessions)
    return by_date_detailed(records, sessions) if detailed else by_date(records, sessions)


@dataclass
class _Group:
    row: Row
    has_unknown: bool = False


@dataclass
class _Totals:
    row: Row = field(default_factory=lambda: Row(key=TOTAL_KEY))
    has_unknown: bool = False


def aggregate(
    records: list[Record],
    sessions: list[Session],
    key_fn: Callable[[Record], str],
    session_key_fn: Callable[[Session], str],
    detailed: bool,
) -> Report:
    """Fold records into rows keyed by key_fn (and model when detailed).

    A group containing any record of an unpriced model reports UNKNOWN_COST,
    as does the total. Session time is summed per key, never per model, and
    attached to the first row of each key only.
    """
    groups: dict[tuple[str, str], _Group] = {}

    for record in records:
        group_key = (key_fn(record), record.model if detailed else "")
        group = groups.get(group_key)
        if group is None:
            group = _Group(row=Row(key=group_key[0], model=group_key[1]))
            groups[group_key] = group

        row = group.row
        row.input += record.input
        row.output += record.output
        row.cache_write += record.cache_write
        row.cache_read += record.cache_read

        cost = calculate_cost(
            record.model, record.input, record.output, record.cache_write, record.cache_read,
        )
        if cost < 0:
            group.has_unknown = True
        else:
            row.cost += cost

    durations: dict[str, timedelta] = {}
    for session in sessions:
        key = session_key_fn(session)
        durations[key] = durations.get(key, timedelta(0)) + session.duration

    totals = _Totals()
    rows: list[Row] = []
    seen_keys: set[str] = set()
    for group_key in sorted(groups):
        group = groups[group_key]
        row = group.row
        if group.has_unknown:
            row.cost = UNKNOWN_COST
        # Only the first row of a key carries its session time
        if row.key not in seen_keys:
            row.duration = durations.get(row.key, timedelta(0))
            seen_keys.add(row.key)
        rows.append(row)
        _add_to_totals(totals, group)

    total = totals.row
    if totals.has_unknown:
        total.cost = UNKNOWN_COST
    total.duration = sum(durations.values(), timedelta(0))

    return Report(rows=rows, total=total)


def _add_to_totals(totals: _Totals, group: _Group):
    total, row = totals.row, group.row
    total.input += row.input
    total.output += row.output
    total.cache_write += row.cache_write
    total.cache_read += row.cache_read
    if group.has_unknown:
        totals.has_unknown = True
    else:
        total.cost += row.cost


def _record_date(record: Record) -> str:
    return date_key(record.time)


def _session_date(session: Session) -> str:
    return session.date


def _record_project(record: Record) -> str:
    return record.project


def _session_project(session: Session) -> str:
    return session.project

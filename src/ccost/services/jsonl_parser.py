"""Streaming JSONL parser for Claude Code session and subagent logs."""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator

import orjson

from ccost.types.messages import AssistantMessage, LogEntry, TokenUsage
from ccost.types.records import Record, Session
from ccost.utils.date_range import date_key, in_range, parse_date, parse_timestamp
from ccost.utils.path_codec import matches_project, project_name_from_cwd
from ccost.utils.pricing import is_known_model, normalize_model

logger = logging.getLogger(__name__)

# Max size for a single JSONL line (10MB)
MAX_LINE_SIZE = 10 * 1024 * 1024


@dataclass
class ScanOptions:
    since: datetime | None = None
    until: datetime | None = None  # inclusive; callers push date-only bounds to end of day
    project: str = ""  # case-insensitive substring


@dataclass
class FileUsage:
    """Everything one log file contributes to a run."""
    records: list[Record] = field(default_factory=list)
    sessions: list[Session] = field(default_factory=list)
    unknown_models: set[str] = field(default_factory=set)


def stream_log_entries(file_path: str | Path) -> Iterator[LogEntry]:
    """Stream-parse a JSONL log file, yielding one LogEntry per valid line.

    Malformed lines and lines with wrongly-typed fields are skipped.
    Raises OSError if the file cannot be read.
    """
    path = Path(file_path)
    line_num = 0
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            line_num += 1
            line = line.strip()
            if not line:
                continue

            if len(line) > MAX_LINE_SIZE:
                logger.debug(
                    "Line %d in %s exceeds %dMB, skipping",
                    line_num, path.name, MAX_LINE_SIZE // (1024 * 1024),
                )
                continue

            try:
                raw = orjson.loads(line)
            except orjson.JSONDecodeError as e:
                logger.debug("Malformed JSON at line %d in %s: %s", line_num, path.name, e)
                continue

            if not isinstance(raw, dict):
                continue

            try:
                entry = _parse_raw_entry(raw)
            except ValueError as e:
                logger.debug("Skipping line %d in %s: %s", line_num, path.name, e)
                continue

            yield entry


def parse_log_file(file_path: str | Path, options: ScanOptions, is_main: bool) -> FileUsage:
    """Turn one log file into deduplicated Records and, for main files, per-day Sessions.

    Assistant messages are deduplicated by message id, keeping the revision
    with the most output tokens (ties keep the first seen). The project
    filter applies to the whole file, since a file belongs to one project.
    """
    best: dict[str, LogEntry] = {}
    project = ""
    days: dict[str, list[datetime]] = {}  # date → [min, max]

    for entry in stream_log_entries(file_path):
        if not project and entry.cwd:
            project = project_name_from_cwd(entry.cwd)

        if is_main:
            ts = parse_timestamp(entry.timestamp)
            if ts is not None:
                day = date_key(ts)
                bounds = days.get(day)
                if bounds is None:
                    days[day] = [ts, ts]
                else:
                    bounds[0] = min(bounds[0], ts)
                    bounds[1] = max(bounds[1], ts)

        if entry.type != "assistant" or not entry.message.id:
            continue
        prev = best.get(entry.message.id)
        if prev is None or entry.message.usage.output_tokens > prev.message.usage.output_tokens:
            best[entry.message.id] = entry

    usage = FileUsage()
    if not matches_project(project, options.project):
        return usage

    for entry in best.values():
        tokens = entry.message.usage
        # All-zero usage marks synthetic, non-billable messages
        if tokens.is_zero:
            continue

        ts = parse_timestamp(entry.timestamp)
        if ts is None:
            continue
        if not in_range(ts, options.since, options.until):
            continue

        model = normalize_model(entry.message.model)
        if model and not is_known_model(model):
            usage.unknown_models.add(model)

        usage.records.append(Record(
            time=ts,
            model=model,
            project=project,
            input=tokens.input_tokens,
            output=tokens.output_tokens,
            cache_write=tokens.cache_creation_input_tokens,
            cache_read=tokens.cache_read_input_tokens,
        ))

    if is_main and project:
        for day, (first, last) in days.items():
            if not in_range(parse_date(day), options.since, options.until):
                continue
            usage.sessions.append(Session(date=day, project=project, duration=last - first))

    return usage


def _parse_raw_entry(raw: dict) -> LogEntry:
    """Parse a raw JSON dict into a LogEntry.

    Missing or null fields become empty. Raises ValueError when a known
    field has the wrong JSON type.
    """
    message = _object_field(raw, "message")
    usage = _object_field(message, "usage")

    return LogEntry(
        type=_str_field(raw, "type"),
        timestamp=_str_field(raw, "timestamp"),
        cwd=_str_field(raw, "cwd"),
        message=AssistantMessage(
            id=_str_field(message, "id"),
            model=_str_field(message, "model"),
            usage=TokenUsage(
                input_tokens=_int_field(usage, "input_tokens"),
                output_tokens=_int_field(usage, "output_tokens"),
                cache_creation_input_tokens=_int_field(usage, "cache_creation_input_tokens"),
                cache_read_input_tokens=_int_field(usage, "cache_read_input_tokens"),
            ),
        ),
    )


def _object_field(obj: dict, key: str) -> dict:
    value = obj.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{key}: expected object, got {type(value).__name__}")
    return value


def _str_field(obj: dict, key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{key}: expected string, got {type(value).__name__}")
    return value


def _int_field(obj: dict, key: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key}: expected integer, got {type(value).__name__}")
    return max(value, 0)

"""Discover Claude Code log files and combine their usage into one run."""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path

from ccost.services.jsonl_parser import FileUsage, ScanOptions, parse_log_file
from ccost.types.records import Record, Session

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    records: list[Record] = field(default_factory=list)
    sessions: list[Session] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def discover_log_files(projects_root: str | Path) -> tuple[list[Path], list[Path]]:
    """Find main session files and subagent files under the projects root.

    Main files:     <project>/<session>.jsonl
    Subagent files: <project>/<session>/subagents/<agent>.jsonl
    """
    root = Path(projects_root)
    if not root.is_dir():
        logger.warning("Projects root does not exist: %s", root)
        return [], []

    main_files = sorted(p for p in root.glob("*/*.jsonl") if p.is_file())
    subagent_files = sorted(p for p in root.glob("*/*/subagents/*.jsonl") if p.is_file())
    return main_files, subagent_files


def scan_usage(
    projects_root: str | Path,
    options: ScanOptions | None = None,
    workers: int = 1,
) -> ScanResult:
    """Read every log file under projects_root into sorted records, sessions and warnings.

    A file that cannot be read is dropped without failing the run. With
    workers > 1 files are parsed in a thread pool; the result is the same
    as a sequential scan.
    """
    if options is None:
        options = ScanOptions()

    main_files, subagent_files = discover_log_files(projects_root)
    jobs = [(path, True) for path in main_files] + [(path, False) for path in subagent_files]
    logger.debug(
        "Scanning %d main and %d subagent files under %s",
        len(main_files), len(subagent_files), projects_root,
    )

    if workers > 1 and len(jobs) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(lambda job: _parse_or_skip(job[0], options, job[1]), jobs))
    else:
        results = [_parse_or_skip(path, options, is_main) for path, is_main in jobs]

    result = ScanResult()
    unknown_models: set[str] = set()
    for usage in results:
        if usage is None:
            continue
        result.records.extend(usage.records)
        result.sessions.extend(usage.sessions)
        unknown_models |= usage.unknown_models

    result.records.sort(key=lambda r: r.time)
    result.sessions.sort(key=lambda s: s.date)
    result.warnings = sorted(f"unknown model: {m}" for m in unknown_models)
    return result


def _parse_or_skip(path: Path, options: ScanOptions, is_main: bool) -> FileUsage | None:
    try:
        return parse_log_file(path, options, is_main)
    except OSError as e:
        logger.debug("Skipping unreadable log file %s: %s", path, e)
        return None

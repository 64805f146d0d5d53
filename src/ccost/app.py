"""Command-line entry point: scan logs, aggregate, and print the report."""

import argparse
import logging
import sys
from pathlib import Path

from ccost.display.json_output import write_json
from ccost.display.table import render_table
from ccost.services.config_manager import ConfigManager
from ccost.services.jsonl_parser import ScanOptions
from ccost.services.log_scanner import scan_usage
from ccost.services.report_builder import build_report
from ccost.utils.date_range import default_since, end_of_day, parse_date

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ccost",
        description="Summarize Claude Code token usage and cost from local JSONL logs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Examples:\n"
               "  ccost --since 2026-02-01\n"
               "  ccost --by-project --models\n"
               "  ccost --project myapp --json\n",
    )
    parser.add_argument("--since", default="", help="start date (YYYY-MM-DD)")
    parser.add_argument("--until", default="", help="end date (YYYY-MM-DD), inclusive")
    parser.add_argument("--all", action="store_true", help="ignore the default trailing-days window")
    parser.add_argument("--project", default="", help="filter by project name (substring)")
    parser.add_argument("--by-project", action="store_true", help="group by project instead of date")
    parser.add_argument("--models", action="store_true", help="show per-model breakdown")
    parser.add_argument("--exact", action="store_true", help="show exact token counts instead of 1.2M/34.5K")
    parser.add_argument("--json", action="store_true", help="output as JSON")
    parser.add_argument("--dir", default="", help="Claude projects directory (default: ~/.claude/projects)")
    parser.add_argument("--config", default="", help="settings file (default: ~/.config/ccost/settings.json)")
    parser.add_argument("--workers", type=int, default=0, help="parse log files in N threads")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def _configure_logging(debug: bool):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _scan_options(args: argparse.Namespace, config: ConfigManager) -> ScanOptions:
    """Build scan options from flags. Raises ValueError naming the bad flag."""
    options = ScanOptions(project=args.project)
    if args.since:
        try:
            options.since = parse_date(args.since)
        except ValueError as e:
            raise ValueError(f"invalid --since date: {e}") from e
    if args.until:
        try:
            options.until = end_of_day(parse_date(args.until))
        except ValueError as e:
            raise ValueError(f"invalid --until date: {e}") from e
    if not args.since and not args.until and not args.all:
        options.since = default_since(config.get_int("general/defaultDays"))
    return options


def run(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        config = ConfigManager(args.config or None)
        projects_root = Path(args.dir).expanduser() if args.dir else config.session_dir()
    except RuntimeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    _configure_logging(args.verbose or config.get_bool("advanced/debugLogging"))

    try:
        options = _scan_options(args, config)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    workers = args.workers or config.get_int("advanced/workers")
    logger.debug("Scanning %s (since=%s until=%s project=%r)",
                 projects_root, options.since, options.until, options.project)
    result = scan_usage(projects_root, options, workers=workers)

    for warning in result.warnings:
        print(f"warning: {warning}", file=sys.stderr)

    if not result.records:
        print("no records found", file=sys.stderr)
        return 0

    group_by_project = args.by_project or config.get_bool("display/byProject")
    detailed = args.models or config.get_bool("display/models")
    report = build_report(result.records, result.sessions, group_by_project, detailed)

    if args.json:
        try:
            write_json(sys.stdout.buffer, report)
        except OSError as e:
            print(f"error writing JSON: {e}", file=sys.stderr)
            return 1
    else:
        exact = args.exact or config.get_bool("display/exact")
        render_table(report, "Project" if group_by_project else "Date", exact=exact)
    return 0

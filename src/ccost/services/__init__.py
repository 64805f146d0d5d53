"""Services for ccost."""

from ccost.services.config_manager import ConfigManager
from ccost.services.jsonl_parser import ScanOptions, parse_log_file, stream_log_entries
from ccost.services.log_scanner import ScanResult, discover_log_files, scan_usage
from ccost.services.report_builder import (
    aggregate,
    build_report,
    by_date,
    by_date_detailed,
    by_project,
    by_project_detailed,
)

__all__ = [
    "ConfigManager",
    "ScanOptions",
    "parse_log_file",
    "stream_log_entries",
    "ScanResult",
    "discover_log_files",
    "scan_usage",
    "aggregate",
    "build_report",
    "by_date",
    "by_date_detailed",
    "by_project",
    "by_project_detailed",
]

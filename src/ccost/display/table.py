"""Rich table output for usage reports."""

from typing import Callable

from rich import box
from rich.console import Console
from rich.table import Table

from ccost.display.formatting import format_compact, format_cost, format_duration, format_number
from ccost.types.reports import TOTAL_KEY, Report, Row

NUMERIC_HEADERS = ["Input", "Output", "Cache Write", "Cache Read", "Time", "Cost"]


def has_models(report: Report) -> bool:
    return any(row.model for row in report.rows)


def common_year(rows: list[Row]) -> str:
    """Return the shared "YYYY" prefix of date-shaped keys, or "" if keys differ or aren't dates."""
    year = ""
    for row in rows:
        if len(row.key) < 5 or row.key[4] != "-":
            return ""
        if not year:
            year = row.key[:4]
        elif row.key[:4] != year:
            return ""
    return year


def _cells(row: Row, fmt_tokens: Callable[[int], str]) -> list[str]:
    return [
        fmt_tokens(row.input),
        fmt_tokens(row.output),
        fmt_tokens(row.cache_write),
        fmt_tokens(row.cache_read),
        format_duration(row.duration),
        format_cost(row.cost),
    ]


def build_table(report: Report, key_header: str, exact: bool = False) -> Table:
    """Build the report table.

    Token counts are compact (1.2M, 34.5K) unless exact is set (1,234,567).
    When every key is a date in the same year, the year moves to the header.
    Cells fold onto extra lines on a narrow console rather than being cut off.
    """
    fmt_tokens = format_number if exact else format_compact
    show_model = has_models(report)
    year = common_year(report.rows)

    table = Table(
        box=box.ROUNDED,
        show_footer=True,
        header_style="cyan",
        footer_style="yellow",
    )
    table.add_column(f"{key_header} ({year})" if year else key_header, footer=TOTAL_KEY, overflow="fold")
    if show_model:
        table.add_column("Model", footer="", overflow="fold")
    for header, footer in zip(NUMERIC_HEADERS, _cells(report.total, fmt_tokens)):
        table.add_column(header, footer=footer, justify="right", overflow="fold")

    prev_key = None
    for row in report.rows:
        display_key = row.key.removeprefix(f"{year}-") if year else row.key
        if show_model:
            if row.key == prev_key:
                display_key = ""
            elif prev_key is not None:
                table.add_section()
            prev_key = row.key
            table.add_row(display_key, row.model, *_cells(row, fmt_tokens))
        else:
            table.add_row(display_key, *_cells(row, fmt_tokens))

    return table


def render_table(report: Report, key_header: str, exact: bool = False, console: Console | None = None):
    """Print the report table to the console (stdout by default)."""
    if console is None:
        console = Console()
    console.print(build_table(report, key_header, exact=exact))

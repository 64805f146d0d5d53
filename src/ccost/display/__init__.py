"""Report rendering for ccost."""

from ccost.display.json_output import dumps_report, write_json
from ccost.display.table import build_table, render_table

__all__ = ["dumps_report", "write_json", "build_table", "render_table"]

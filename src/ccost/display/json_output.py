"""JSON report output."""

from typing import BinaryIO

import orjson

from ccost.display.formatting import round_cost
from ccost.types.reports import Report, Row


def row_to_dict(row: Row) -> dict:
    data = {"key": row.key}
    if row.model:
        data["model"] = row.model
    data.update({
        "input_tokens": row.input,
        "output_tokens": row.output,
        "cache_write_tokens": row.cache_write,
        "cache_read_tokens": row.cache_read,
        "cost": round_cost(row.cost),
    })
    seconds = int(row.duration.total_seconds())
    if seconds:
        data["duration_seconds"] = seconds
    return data


def report_to_dict(report: Report) -> dict:
    return {
        "rows": [row_to_dict(row) for row in report.rows],
        "total": row_to_dict(report.total),
    }


def dumps_report(report: Report) -> bytes:
    return orjson.dumps(report_to_dict(report), option=orjson.OPT_INDENT_2 | orjson.OPT_APPEND_NEWLINE)


def write_json(stream: BinaryIO, report: Report):
    """Write the report as indented JSON to a binary stream."""
    stream.write(dumps_report(report))
    stream.flush()

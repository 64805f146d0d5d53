"""Type definitions for ccost."""

from ccost.types.messages import AssistantMessage, LogEntry, TokenUsage
from ccost.types.records import Record, Session
from ccost.types.reports import TOTAL_KEY, UNKNOWN_COST, Report, Row

__all__ = [
    "AssistantMessage",
    "LogEntry",
    "TokenUsage",
    "Record",
    "Session",
    "Report",
    "Row",
    "TOTAL_KEY",
    "UNKNOWN_COST",
]

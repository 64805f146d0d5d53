"""Aggregated report rows."""

from dataclasses import dataclass, field
from datetime import timedelta

# Cost of a row containing at least one model without known pricing
UNKNOWN_COST = -1.0

TOTAL_KEY = "TOTAL"


@dataclass
class Row:
    key: str              # date (YYYY-MM-DD) or project name
    model: str = ""       # only set in per-model mode
    input: int = 0
    output: int = 0
    cache_write: int = 0
    cache_read: int = 0
    cost: float = 0.0
    duration: timedelta = timedelta(0)  # zero on per-model rows after the first

    @property
    def cost_known(self) -> bool:
        return self.cost >= 0


@dataclass
class Report:
    rows: list[Row] = field(default_factory=list)
    total: Row = field(default_factory=lambda: Row(key=TOTAL_KEY))

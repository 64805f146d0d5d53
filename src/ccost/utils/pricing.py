"""Model pricing table and cost calculation."""

import re

from ccost.types.reports import UNKNOWN_COST

# USD per 1M tokens. Claude Code writes the 1-hour ephemeral cache:
# cache_create = 2x input, cache_read = 0.1x input.
MODEL_COSTS: dict[str, dict[str, float]] = {
    "claude-opus-4-6":   {"input": 5.00,  "output": 25.00, "cache_create": 10.00, "cache_read": 0.50},
    "claude-opus-4-5":   {"input": 5.00,  "output": 25.00, "cache_create": 10.00, "cache_read": 0.50},
    "claude-opus-4-1":   {"input": 15.00, "output": 75.00, "cache_create": 30.00, "cache_read": 1.50},
    "claude-opus-4":     {"input": 15.00, "output": 75.00, "cache_create": 30.00, "cache_read": 1.50},
    "claude-sonnet-4-6": {"input": 3.00,  "output": 15.00, "cache_create": 6.00,  "cache_read": 0.30},
    "claude-sonnet-4-5": {"input": 3.00,  "output": 15.00, "cache_create": 6.00,  "cache_read": 0.30},
    "claude-sonnet-4":   {"input": 3.00,  "output": 15.00, "cache_create": 6.00,  "cache_read": 0.30},
    "claude-sonnet-3-7": {"input": 3.00,  "output": 15.00, "cache_create": 6.00,  "cache_read": 0.30},
    "claude-haiku-4-5":  {"input": 1.00,  "output": 5.00,  "cache_create": 2.00,  "cache_read": 0.10},
    "claude-haiku-3-5":  {"input": 0.80,  "output": 4.00,  "cache_create": 1.60,  "cache_read": 0.08},
    "claude-opus-3":     {"input": 15.00, "output": 75.00, "cache_create": 30.00, "cache_read": 1.50},
    "claude-haiku-3":    {"input": 0.25,  "output": 1.25,  "cache_create": 0.50,  "cache_read": 0.03},
}

_DATE_SUFFIX = re.compile(r"-\d{8}\Z")


def normalize_model(model: str) -> str:
    """Strip a trailing date stamp: claude-sonnet-4-5-20250929 → claude-sonnet-4-5."""
    return _DATE_SUFFIX.sub("", model)


def lookup(model: str) -> dict[str, float] | None:
    """Return the per-million rates for a model, or None if it has no known price."""
    return MODEL_COSTS.get(normalize_model(model))


def is_known_model(model: str) -> bool:
    return lookup(model) is not None


def calculate_cost(
    model: str,
    input_tokens: int,
    output_tokens: int,
    cache_creation_tokens: int,
    cache_read_tokens: int,
) -> float:
    """Calculate cost in USD for the given token counts.

    Returns UNKNOWN_COST when the model has no known price.
    """
    costs = lookup(model)
    if costs is None:
        return UNKNOWN_COST
    return (
        input_tokens * costs["input"]
        + output_tokens * costs["output"]
        + cache_creation_tokens * costs["cache_create"]
        + cache_read_tokens * costs["cache_read"]
    ) / 1_000_000

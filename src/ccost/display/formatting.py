"""Number, cost and duration formatting for report output."""

from datetime import timedelta


def format_number(n: int) -> str:
    """1234567 → 1,234,567"""
    return f"{n:,}"


def format_compact(n: int) -> str:
    """Compact token counts: 999 → 999, 1234 → 1.2K, 6430159 → 6.4M, 10000000 → 10M."""
    if n >= 1_000_000:
        return _trim_decimal(f"{n / 1_000_000:.1f}") + "M"
    if n >= 1_000:
        return _trim_decimal(f"{n / 1_000:.1f}") + "K"
    return str(n)


def _trim_decimal(s: str) -> str:
    return s.rstrip("0").rstrip(".")


def format_cost(cost: float) -> str:
    if cost < 0:
        return "N/A"
    return f"${cost:.2f}"


def round_cost(cost: float) -> float:
    """Round to cents; the unknown-cost sentinel passes through unchanged."""
    if cost < 0:
        return cost
    return round(cost, 2)


def format_duration(duration: timedelta) -> str:
    """2h15m style; zero renders as an empty cell."""
    if not duration:
        return ""
    hours, minutes = divmod(int(duration.total_seconds()) // 60, 60)
    return f"{hours}h{minutes:02d}m"

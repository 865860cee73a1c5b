"""Comparison of actual and forecast spending against a monthly budget."""

from __future__ import annotations

from typing import Optional

from .formatting import format_currency


def budget_usage_percent(spent: float, monthly_budget: float) -> float:
    """Share of the monthly budget already spent, as a percentage capped at 100."""
    if monthly_budget <= 0:
        return 100.0 if spent > 0 else 0.0
    return min(spent / monthly_budget * 100.0, 100.0)


def budget_overrun(forecast: Optional[float], monthly_budget: float) -> Optional[float]:
    """Amount by which ``forecast`` exceeds the budget, or ``None`` if it does not."""
    if forecast is None or forecast <= monthly_budget:
        return None
    return float(forecast - monthly_budget)


def budget_overrun_message(
    forecast: Optional[float],
    monthly_budget: float,
    symbol: str = '$',
) -> Optional[str]:
    """Human readable warning when a forecast exceeds the budget.

    Example:
        >>> budget_overrun_message(2150, 2000)
        'Forecast exceeds budget by $150.00'
    """
    overrun = budget_overrun(forecast, monthly_budget)
    if overrun is None:
        return None
    return f"Forecast exceeds budget by {format_currency(overrun, symbol)}"

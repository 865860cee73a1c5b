"""Combined forecast summary for the current and the next month.

The expense collection is normalised once and handed to both forecasters,
together with the budget comparison the dashboard needs.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from .budget import budget_overrun, budget_overrun_message, budget_usage_percent
from .cross_month import forecast_next_month
from .formatting import currency_symbol
from .intra_month import forecast_current_month
from .records import ExpenseInput, normalize_expenses
from .settings_storage import DEFAULT_SETTINGS


def build_forecast_report(
    expenses: ExpenseInput,
    settings: Optional[Mapping[str, Any]] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Forecast both months and compare them with the monthly budget.

    Args:
        expenses: Expense records for a single owner
        settings: Mapping with ``monthly_budget`` and ``currency``; defaults
            are used for missing keys
        now: Reference instant for the current-month forecast

    Returns:
        Dictionary with keys ``currency_symbol``, ``monthly_budget``,
        ``spent_this_month``, ``budget_used_percent``, ``current_month``,
        ``next_month`` (``None`` without data), ``current_month_overrun``,
        ``next_month_overrun`` and ``warnings``.
    """
    merged = DEFAULT_SETTINGS.copy()
    merged.update(settings or {})
    budget = float(merged['monthly_budget'])
    symbol = currency_symbol(merged['currency'])

    frame = normalize_expenses(expenses)
    current = forecast_current_month(frame, now=now)
    upcoming = forecast_next_month(frame)
    next_value = upcoming.forecast if upcoming is not None else None

    warnings = [
        message
        for message in (
            budget_overrun_message(current.forecast, budget, symbol),
            budget_overrun_message(next_value, budget, symbol),
        )
        if message
    ]
    return {
        'currency_symbol': symbol,
        'monthly_budget': budget,
        'spent_this_month': current.current_total,
        'budget_used_percent': budget_usage_percent(current.current_total, budget),
        'current_month': current,
        'next_month': upcoming,
        'current_month_overrun': budget_overrun(current.forecast, budget),
        'next_month_overrun': budget_overrun(next_value, budget),
        'warnings': warnings,
    }

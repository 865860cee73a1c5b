"""Top‑level package for the spending forecast engine.

The primary modules are:

* ``records`` – normalisation of expense records from any backend shape
* ``intra_month`` – projection of the current month's total
* ``cross_month`` – projection of next month's total
* ``estimators`` – regression and summary statistics shared by both

Both forecasters are pure functions of the expense collection (plus a
reference instant for the current month) and can be called from a UI,
a script or a REST handler alike.
"""

from .cross_month import NextMonthForecast, forecast_next_month  # noqa: F401
from .intra_month import CurrentMonthForecast, forecast_current_month  # noqa: F401
from .records import ExpenseRecord, normalize_expenses, read_expense_file  # noqa: F401
from .report import build_forecast_report  # noqa: F401

__all__ = [
    "ExpenseRecord",
    "normalize_expenses",
    "read_expense_file",
    "CurrentMonthForecast",
    "forecast_current_month",
    "NextMonthForecast",
    "forecast_next_month",
    "build_forecast_report",
]

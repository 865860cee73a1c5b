"""Projection of the current month's total spend from the days elapsed so far.

The projection blends two estimators over the cumulative daily spend:

* an ordinary least-squares line extended to the last day of the month, and
* a flat extrapolation of the average daily spend so far.

Averaging the two damps the overshoot a line fitted to a handful of points
can produce, while still following a trend that the flat average ignores.
The result is never lower than what has already been spent.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

import pandas as pd

from . import config
from .aggregation import cumulative_totals, daily_totals, format_month, month_period
from .estimators import linear_regression, round_half_up
from .records import ExpenseInput, coerce_date, normalize_expenses

logger = logging.getLogger(__name__)

INSUFFICIENT_DAILY_DATA_MESSAGE = 'Insufficient data for daily trend. Showing current total.'


@dataclass(frozen=True)
class CurrentMonthForecast:
    forecast: float
    month: pd.Period
    today: int
    current_total: float
    daily_totals: List[float] = field(default_factory=list)
    cumulative: List[float] = field(default_factory=list)
    slope: Optional[float] = None
    intercept: Optional[float] = None
    message: Optional[str] = None

    @property
    def days_in_month(self) -> int:
        return len(self.daily_totals)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'forecast': self.forecast,
            'month': format_month(self.month),
            'today': self.today,
            'current_total': self.current_total,
            'daily_totals': list(self.daily_totals),
            'cumulative': list(self.cumulative),
        }
        if self.slope is not None:
            payload['slope'] = self.slope
            payload['intercept'] = self.intercept
        if self.message is not None:
            payload['message'] = self.message
        return payload


def forecast_current_month(
    expenses: ExpenseInput,
    now: Optional[datetime] = None,
) -> CurrentMonthForecast:
    """Forecast the end-of-month total for the month containing ``now``.

    Args:
        expenses: Expense records in any shape accepted by
            :func:`~spend_forecast.records.normalize_expenses`
        now: Reference instant; defaults to the current wall-clock time

    Returns:
        ``CurrentMonthForecast``.  With fewer than two elapsed days the
        forecast is the total so far and ``message`` explains why; otherwise
        ``slope``/``intercept`` describe the fitted cumulative trend.
    """
    reference = coerce_date(now if now is not None else datetime.now())
    month = month_period(reference)
    today = reference.day
    days_in_month = month.days_in_month

    frame = normalize_expenses(expenses)
    daily = daily_totals(frame, month)
    cumulative = cumulative_totals(daily)

    elapsed = cumulative.loc[1:today]
    current_total = float(elapsed.iloc[-1]) if not elapsed.empty else 0.0
    daily_list = daily.tolist()
    cumulative_list = cumulative.tolist()

    if today < config.MIN_REGRESSION_DAYS:
        logger.debug("Day %d of %s: not enough elapsed days for a trend", today, month)
        return CurrentMonthForecast(
            forecast=current_total,
            month=month,
            today=today,
            current_total=current_total,
            daily_totals=daily_list,
            cumulative=cumulative_list,
            message=INSUFFICIENT_DAILY_DATA_MESSAGE,
        )

    slope, intercept = linear_regression(elapsed.index.tolist(), elapsed.tolist())
    regression_forecast = slope * days_in_month + intercept
    extrapolated_forecast = current_total / today * days_in_month
    forecast = round_half_up((regression_forecast + extrapolated_forecast) / 2)

    # Never predict less than has already been spent
    if forecast < current_total:
        forecast = max(round_half_up(current_total), current_total)

    logger.debug(
        "Month %s day %d: regression=%.2f extrapolated=%.2f forecast=%.2f",
        month, today, regression_forecast, extrapolated_forecast, forecast,
    )
    return CurrentMonthForecast(
        forecast=forecast,
        month=month,
        today=today,
        current_total=current_total,
        daily_totals=daily_list,
        cumulative=cumulative_list,
        slope=slope,
        intercept=intercept,
    )

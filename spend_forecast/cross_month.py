"""Projection of next month's total spend from completed monthly totals.

Which estimator is used depends on how many months of history exist:

* one month: that month's total is repeated,
* two or three months: mean of the moving average and the median,
* more than three: mean of a linear trend, the moving average and the
  median, so that a single noisy month cannot dominate.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from . import config
from .aggregation import format_month, monthly_totals
from .estimators import linear_regression, median, moving_average, round_half_up
from .records import ExpenseInput, normalize_expenses

logger = logging.getLogger(__name__)

METHOD_SINGLE_MONTH = 'single_month'
METHOD_BLENDED = 'blended'
METHOD_ENSEMBLE = 'ensemble'


@dataclass(frozen=True)
class NextMonthForecast:
    forecast: float
    target_month: str
    method: str
    message: str
    months: List[str] = field(default_factory=list)
    monthly_totals: Dict[str, float] = field(default_factory=dict)
    moving_average: Optional[float] = None
    median: Optional[float] = None
    regression_forecast: Optional[float] = None
    slope: Optional[float] = None
    intercept: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            'forecast': self.forecast,
            'target_month': self.target_month,
            'method': self.method,
            'months': list(self.months),
            'monthly_totals': dict(self.monthly_totals),
            'message': self.message,
        }
        if self.slope is not None:
            payload['slope'] = self.slope
            payload['intercept'] = self.intercept
        return payload


def forecast_next_month(expenses: ExpenseInput) -> Optional[NextMonthForecast]:
    """Forecast total spend for the month after the latest month in ``expenses``.

    ``expenses`` is expected to belong to a single owner already.  Returns
    ``None`` when there are no usable records.
    """
    totals_series = monthly_totals(normalize_expenses(expenses))
    if totals_series.empty:
        return None

    periods = list(totals_series.index)
    totals = totals_series.tolist()
    months = [format_month(period) for period in periods]
    by_month = dict(zip(months, totals))
    target_month = format_month(periods[-1] + 1)
    n = len(totals)

    if n == 1:
        logger.debug("Single month of history (%s); repeating its total", months[0])
        return NextMonthForecast(
            forecast=totals[0],
            target_month=target_month,
            method=METHOD_SINGLE_MONTH,
            message="Only one month of data. Using last month's spending.",
            months=months,
            monthly_totals=by_month,
        )

    avg = moving_average(totals, window=config.MOVING_AVERAGE_WINDOW)
    med = median(totals)

    if n < config.MIN_REGRESSION_MONTHS:
        forecast = max(round_half_up((avg + med) / 2), 0.0)
        logger.debug("%d months of history: moving average=%s median=%s", n, avg, med)
        return NextMonthForecast(
            forecast=forecast,
            target_month=target_month,
            method=METHOD_BLENDED,
            message=f"Average of the last {n} months' moving average and median.",
            months=months,
            monthly_totals=by_month,
            moving_average=avg,
            median=med,
        )

    slope, intercept = linear_regression(range(1, n + 1), totals)
    regression_forecast = slope * (n + 1) + intercept
    forecast = max(round_half_up((regression_forecast + avg + med) / 3), 0.0)
    logger.debug(
        "%d months of history: regression=%.2f moving average=%s median=%s",
        n, regression_forecast, avg, med,
    )
    return NextMonthForecast(
        forecast=forecast,
        target_month=target_month,
        method=METHOD_ENSEMBLE,
        message='Ensemble of regression, moving average, and median.',
        months=months,
        monthly_totals=by_month,
        moving_average=avg,
        median=med,
        regression_forecast=regression_forecast,
        slope=slope,
        intercept=intercept,
    )

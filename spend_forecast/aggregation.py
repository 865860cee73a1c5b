"""Daily and monthly aggregation of normalised expense frames."""

from __future__ import annotations

import pandas as pd


def month_period(moment) -> pd.Period:
    """Return the calendar month containing ``moment`` as a ``Period``."""
    return pd.Period(pd.Timestamp(moment), freq='M')


def daily_totals(expenses: pd.DataFrame, month: pd.Period) -> pd.Series:
    """Sum amounts per day-of-month for ``month``.

    The result is indexed ``1..days_in_month`` and days without spending
    are zero, so its length always matches the month.
    """
    days = pd.RangeIndex(1, month.days_in_month + 1, name='day')
    if expenses.empty:
        return pd.Series(0.0, index=days, name='amount')

    in_month = expenses[expenses['date'].dt.to_period('M') == month]
    grouped = in_month.groupby(in_month['date'].dt.day)['amount'].sum()
    return grouped.reindex(days, fill_value=0.0).astype(float).rename('amount')


def cumulative_totals(daily: pd.Series) -> pd.Series:
    """Running sum of a daily series; ``cumulative[d]`` is spend through day ``d``."""
    return daily.cumsum().rename('cumulative')


def monthly_totals(expenses: pd.DataFrame) -> pd.Series:
    """Total spend per calendar month, indexed by ``Period`` in chronological order.

    Months without any records are absent rather than zero.
    """
    if expenses.empty:
        return pd.Series(dtype=float, name='amount')
    months = expenses['date'].dt.to_period('M').rename('month')
    return expenses.groupby(months)['amount'].sum().sort_index().astype(float).rename('amount')


def format_month(month: pd.Period) -> str:
    """Render a month key as ``YYYY-MM``."""
    return month.strftime('%Y-%m')

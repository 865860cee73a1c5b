"""Expense record types and input normalisation.

The forecasters accept expenses in whatever shape the caller has on hand:
``ExpenseRecord`` instances, plain mappings with ``date``/``amount`` keys,
or a pandas DataFrame.  Everything is funnelled through
:func:`normalize_expenses`, which produces a two column frame and silently
drops rows that cannot contribute to a forecast (no parseable date, or an
amount that is missing, non-numeric or negative).

Backend specific date representations are converted here so the forecasting
code only ever sees naive ``datetime64`` values.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

EXPENSE_COLUMNS = ['date', 'amount']

# Column names seen in bank/app exports, lower-cased
COLUMN_ALIASES: Dict[str, str] = {
    'date': 'date',
    'transaction date': 'date',
    'posted date': 'date',
    'timestamp': 'date',
    'amount': 'amount',
    'value': 'amount',
}


@dataclass(frozen=True)
class ExpenseRecord:
    date: datetime
    amount: float


ExpenseInput = Optional[Union[pd.DataFrame, Iterable[Any]]]


def coerce_date(value: Any) -> pd.Timestamp:
    """Convert a date representation into a naive Timestamp, or ``NaT``.

    Accepts ``datetime``/``date`` objects, pandas Timestamps, ISO strings,
    epoch milliseconds and ``{"seconds": ..., "nanoseconds": ...}`` mappings
    as produced by document-store timestamp serialisers.  Timezone-aware
    values keep their own wall-clock time.
    """
    if value is None or isinstance(value, bool):
        return pd.NaT
    if isinstance(value, Mapping):
        seconds = value.get('seconds', value.get('_seconds'))
        if seconds is None:
            return pd.NaT
        nanos = value.get('nanoseconds', value.get('_nanoseconds', 0)) or 0
        try:
            return pd.Timestamp(int(seconds), unit='s') + pd.Timedelta(int(nanos), unit='ns')
        except (TypeError, ValueError, OverflowError):
            return pd.NaT
    if isinstance(value, (int, float, np.integer, np.floating)):
        if not np.isfinite(value):
            return pd.NaT
        try:
            return pd.Timestamp(int(value), unit='ms')
        except (ValueError, OverflowError):
            return pd.NaT
    try:
        stamp = pd.to_datetime(value, errors='coerce')
    except (TypeError, ValueError):
        return pd.NaT
    if not isinstance(stamp, pd.Timestamp) or pd.isna(stamp):
        return pd.NaT
    if stamp.tzinfo is not None:
        stamp = stamp.tz_localize(None)
    return stamp


def coerce_amount(value: Any) -> float:
    """Return ``value`` as a non-negative float, or NaN when unusable."""
    if value is None or isinstance(value, bool):
        return np.nan
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return np.nan
    if not np.isfinite(amount) or amount < 0:
        return np.nan
    return amount


def _rename_aliases(frame: pd.DataFrame) -> pd.DataFrame:
    renames = {}
    for column in frame.columns:
        target = COLUMN_ALIASES.get(str(column).strip().lower())
        if target and target not in frame.columns and target not in renames.values():
            renames[column] = target
    return frame.rename(columns=renames)


def _as_frame(expenses: ExpenseInput) -> pd.DataFrame:
    if expenses is None:
        return pd.DataFrame(columns=EXPENSE_COLUMNS)
    if isinstance(expenses, pd.DataFrame):
        frame = _rename_aliases(expenses.copy())
    else:
        rows: List[Dict[str, Any]] = []
        for item in expenses:
            if isinstance(item, Mapping):
                rows.append({'date': item.get('date'), 'amount': item.get('amount')})
            else:
                rows.append({
                    'date': getattr(item, 'date', None),
                    'amount': getattr(item, 'amount', None),
                })
        frame = pd.DataFrame(rows, columns=EXPENSE_COLUMNS)
    for column in EXPENSE_COLUMNS:
        if column not in frame.columns:
            frame[column] = None
    return frame[EXPENSE_COLUMNS]


def normalize_expenses(expenses: ExpenseInput) -> pd.DataFrame:
    """Return a ``date``/``amount`` frame with unusable rows removed.

    The input is never modified.  Rows with an unparseable date or an
    invalid amount are excluded rather than failing the whole computation.
    """
    frame = _as_frame(expenses)
    dates = [coerce_date(value) for value in frame['date'].tolist()]
    amounts = [coerce_amount(value) for value in frame['amount'].tolist()]
    normalized = pd.DataFrame({
        'date': pd.to_datetime(pd.Series(dates, dtype=object), errors='coerce'),
        'amount': pd.Series(amounts, dtype=float),
    })

    invalid = normalized.isna().any(axis=1)
    dropped = int(invalid.sum())
    if dropped:
        logger.debug("Dropped %d of %d expense rows without a usable date or amount", dropped, len(normalized))
    return normalized[~invalid].reset_index(drop=True)


def read_expense_file(path_or_buffer) -> pd.DataFrame:
    """Load a CSV or JSON expense export and normalise it.

    JSON files may hold a list of expense objects or an object with an
    ``expenses`` list.
    """
    if hasattr(path_or_buffer, "read"):
        name = getattr(path_or_buffer, "name", "uploaded_file.csv").lower()
        if name.endswith(".json"):
            return normalize_expenses(_json_rows(json.load(path_or_buffer)))
        return normalize_expenses(pd.read_csv(path_or_buffer, index_col=False))

    path = Path(path_or_buffer)
    ext = path.suffix.lower()
    if ext in {".csv", ""}:
        return normalize_expenses(pd.read_csv(path, index_col=False))
    if ext == ".json":
        with path.open('r', encoding='utf-8') as handle:
            return normalize_expenses(_json_rows(json.load(handle)))
    raise ValueError(f"Unsupported file extension '{ext}'.")


def _json_rows(data: Any) -> List[Any]:
    if isinstance(data, Mapping):
        data = data.get('expenses') or []
    if not isinstance(data, list):
        logger.warning("Expense JSON did not contain a list of expenses")
        return []
    return data

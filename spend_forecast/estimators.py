"""Statistical primitives shared by the forecasters.

Every estimator here is a pure function over a plain sequence of numbers so
it can be exercised in isolation.  Rounding is half-up (``2.5 -> 3``),
not the banker's rounding of the built-in :func:`round`.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import numpy as np


def round_half_up(value: float) -> float:
    """Round to the nearest whole number, ties towards positive infinity."""
    return float(math.floor(value + 0.5))


def linear_regression(x: Sequence[float], y: Sequence[float]) -> Tuple[float, float]:
    """Ordinary least-squares fit of ``y = slope * x + intercept``.

    Callers must supply at least two points with distinct ``x`` values; the
    degenerate cases are routed elsewhere before this is reached.

    Example:
        >>> linear_regression([1, 2, 3, 4, 5], [100, 200, 300, 400, 500])
        (100.0, 0.0)
    """
    xs = np.asarray(x, dtype=float)
    ys = np.asarray(y, dtype=float)
    n = len(xs)
    sum_x = xs.sum()
    sum_y = ys.sum()
    sum_xy = (xs * ys).sum()
    sum_x2 = (xs * xs).sum()

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    return float(slope), float(intercept)


def moving_average(values: Sequence[float], window: int = 3) -> float:
    """Half-up rounded mean of the last ``min(window, len(values))`` values."""
    count = min(window, len(values))
    if count == 0:
        return 0.0
    recent = np.asarray(values[-count:], dtype=float)
    return round_half_up(recent.mean())


def median(values: Sequence[float]) -> float:
    """Half-up rounded median; even-length input averages the two central values."""
    if len(values) == 0:
        return 0.0
    return round_half_up(float(np.median(np.asarray(values, dtype=float))))

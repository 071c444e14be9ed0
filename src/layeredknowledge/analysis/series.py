"""
Series Helpers
==============
A series is an ordered sequence of nullable real numbers, one entry per
observation (e.g. per year). ``None`` marks a missing entry. NaN, which
tabular loaders commonly produce for empty cells, is read as missing too.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, TYPE_CHECKING, Tuple

import numpy as np

from layeredknowledge.errors import SizeMismatchError

if TYPE_CHECKING:
    import numpy.typing as npt

Series = Sequence[Optional[float]]


def as_array(series: Series) -> npt.NDArray[np.float64]:
    """Convert a series to a float array with NaN for missing entries."""
    return np.array([np.nan if value is None else float(value) for value in series], dtype=np.float64)


def observed_pairs(x: Series, y: Series) -> Tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Pairwise deletion: keep only the positions where both series are observed.

    Args:
        x: First series.
        y: Second series, same length as ``x``.

    Raises:
        SizeMismatchError: If the series differ in length.

    Returns:
        Two equal-length arrays holding the observed pairs in original order.
    """
    if len(x) != len(y):
        raise SizeMismatchError(len(x), len(y))

    x_arr = as_array(x)
    y_arr = as_array(y)
    observed = ~(np.isnan(x_arr) | np.isnan(y_arr))
    return x_arr[observed], y_arr[observed]


def shift_by(series: Series, periods: int) -> List[Optional[float]]:
    """
    Lag a series by ``periods`` positions, keeping its length.

    The first ``periods`` entries become missing and the last ``periods``
    entries fall off the end. Used to build "previous period" variables.

    Raises:
        ValueError: If ``periods`` is not positive.
    """
    if periods <= 0:
        raise ValueError(f"Only positive shifts are supported, got {periods}.")

    n = len(series)
    lag = min(periods, n)
    return [None] * lag + list(series[:n - lag])

"""
Dependency Scoring
==================
Computes how well one series predicts another and turns those scores into
dependency tables.

The directional score of Y on X is

    score(X, Y) = 1 - STE(X -> Y) / mean(Y)

where STE is the standard error of estimate of the simple linear regression
of Y on X (the quantity spreadsheet software calls STEYX):

    STE = sqrt((Syy - Sxy^2 / Sxx) / (n - 2))

Sums run over the n positions where both series are observed.
"""
from __future__ import annotations

import logging
from math import sqrt
from typing import Sequence

import numpy as np

from layeredknowledge.analysis.series import Series, observed_pairs
from layeredknowledge.config import DEFAULT_MINIMUM, MIN_OBSERVATIONS
from layeredknowledge.errors import (
    InsufficientDataError,
    NumericError,
    ScoreRangeError,
    ZeroMeanError,
    ZeroVarianceError,
)
from layeredknowledge.model.scores import INSUFFICIENT_EVIDENCE, Score
from layeredknowledge.model.tables import DependencyTable

logger = logging.getLogger(__name__)


def score(x: Series, y: Series) -> float:
    """
    Directional dependency of ``y`` on ``x``.

    Args:
        x: Values of the variable thought to be independent.
        y: Values of the variable thought to be dependent. Same length as x.

    Raises:
        SizeMismatchError: If ``x`` and ``y`` differ in length.
        InsufficientDataError: If fewer than three pairs are fully observed.
        ZeroVarianceError: If ``x`` is constant over the observed pairs.
        ZeroMeanError: If ``y`` averages to zero over the observed pairs.
        ScoreRangeError: If the result falls outside [0, 1]. This happens when
            ``y`` has a negative mean, or when the regression error exceeds
            the mean of ``y``.

    Returns:
        The score in [0, 1]. 1 means y is an exact linear function
        of x.
    """
    x_obs, y_obs = observed_pairs(x, y)
    n = x_obs.size
    if n < MIN_OBSERVATIONS:
        raise InsufficientDataError(n, MIN_OBSERVATIONS)
    if np.ptp(x_obs) == 0.0:
        raise ZeroVarianceError()

    y_mean = y_obs.mean()
    if y_mean == 0.0:
        raise ZeroMeanError()

    dx = x_obs - x_obs.mean()
    dy = y_obs - y_mean
    s_xx = float(np.dot(dx, dx))
    s_yy = float(np.dot(dy, dy))
    s_xy = float(np.dot(dx, dy))

    # Rounding can push an exact fit slightly below zero
    residual = max(s_yy - s_xy ** 2 / s_xx, 0.0)
    ste = sqrt(residual / (n - 2))

    result = 1.0 - ste / y_mean
    if not 0.0 <= result <= 1.0:
        raise ScoreRangeError(result, y_mean)
    return float(result)


def net_score(x: Series, y: Series, minimum: float = DEFAULT_MINIMUM) -> Score:
    """
    Forward score minus backward score, if the forward evidence is strong.

    Returns:
        ``score(x, y) - score(y, x)`` when ``score(x, y) > minimum``;
        otherwise ``INSUFFICIENT_EVIDENCE``. A score that is numerically
        undefined in either direction also yields ``INSUFFICIENT_EVIDENCE``.
    """
    try:
        forward = score(x, y)
    except NumericError as e:
        logger.debug(f"Forward score undefined: {e}")
        return INSUFFICIENT_EVIDENCE

    if not forward > minimum:
        return INSUFFICIENT_EVIDENCE

    try:
        backward = score(y, x)
    except NumericError as e:
        logger.debug(f"Backward score undefined: {e}")
        return INSUFFICIENT_EVIDENCE

    return forward - backward


def score_matrix(
    independent_group: Sequence[Series],
    dependent_group: Sequence[Series],
    minimum: float = DEFAULT_MINIMUM,
) -> DependencyTable:
    """
    Score every (independent, dependent) pair of series.

    Args:
        independent_group: One series per variable of the independent layer.
        dependent_group: One series per variable of the dependent layer.
        minimum: Forward score a pair must exceed to receive a numeric cell.

    Raises:
        SizeMismatchError: If two paired series differ in length.

    Returns:
        A ``len(independent_group)`` x ``len(dependent_group)`` table whose
        cell [i, j] is ``net_score(independent_group[i], dependent_group[j])``.
    """
    table = DependencyTable(len(independent_group), len(dependent_group))
    for i, x in enumerate(independent_group):
        for j, y in enumerate(dependent_group):
            table[i, j] = net_score(x, y, minimum)
    return table

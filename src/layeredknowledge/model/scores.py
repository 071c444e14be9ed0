"""
Dependency Scores
=================
Defines the value a dependency-table cell can hold.

A cell is in exactly one of three states:

* unset (``None``): the table was created or reset and nobody filled it yet;
* scored (``float``): a finite dependency score;
* ``INSUFFICIENT_EVIDENCE``: the scorer declined to produce a number because
  the forward evidence was too weak.

``INSUFFICIENT_EVIDENCE`` is an enum member rather than ``-inf`` so it can
never pass a numeric comparison by accident, whatever the threshold.
"""
from __future__ import annotations

from enum import Enum
import math
from typing import Optional, Union

from layeredknowledge.errors import ShapeError


class Evidence(Enum):
    INSUFFICIENT = "insufficient evidence"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.{self.name}"


INSUFFICIENT_EVIDENCE = Evidence.INSUFFICIENT

# Union for type hinting
Score = Union[float, Evidence]
Cell = Optional[Score]


def normalize_cell(value: object) -> Cell:
    """
    Convert a caller-supplied cell into its canonical representation.

    Args:
        value: ``None``, ``INSUFFICIENT_EVIDENCE`` or anything ``float()``
            accepts. Negative infinity is read as insufficient evidence, the
            convention used by older score producers.

    Raises:
        ShapeError: If the value is NaN, positive infinity, or not numeric.

    Returns:
        The canonical cell value.
    """
    if value is None or value is INSUFFICIENT_EVIDENCE:
        return value
    if isinstance(value, bool):
        raise ShapeError(f"Dependency scores must be numeric, got {value!r}.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ShapeError(f"Dependency scores must be numeric, got {value!r}.") from None

    if math.isnan(number):
        raise ShapeError("NaN is not a dependency score; use None for an unset cell.")
    if number == -math.inf:
        return INSUFFICIENT_EVIDENCE
    if number == math.inf:
        raise ShapeError("Positive infinity is not a dependency score.")
    return number


def meets_threshold(score: Score, threshold: float) -> bool:
    """
    Whether a filled cell is strong enough to become a variable-level edge.

    Insufficient evidence never meets a threshold, including zero and
    negative ones.
    """
    if score is INSUFFICIENT_EVIDENCE:
        return False
    return score >= threshold

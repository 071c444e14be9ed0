"""
Exception Hierarchy
===================
Every failure raised by the package derives from ``DomainKnowledgeError``.
Where the failure maps onto a built-in category (bad argument, bad
arithmetic) the class also derives from that built-in, so ``except
ValueError`` keeps working for callers that do not know this module.
"""
from __future__ import annotations

from typing import Optional


class DomainKnowledgeError(Exception):
    """Base class for all errors raised by layeredknowledge."""


# --- Configuration -----------------------------------------------------------

class ConfigurationError(DomainKnowledgeError, ValueError):
    """A layer or relation is referenced that does not exist, or created twice."""


class LayerExistsError(ConfigurationError):
    def __init__(self, layer: str) -> None:
        self.layer = layer
        super().__init__(
            f"Layer '{layer}' already exists. "
            f"Use remove_layer or replace_layer to change an existing layer."
        )


class LayerNotFoundError(ConfigurationError):
    def __init__(self, layer: str) -> None:
        self.layer = layer
        super().__init__(
            f"Layer '{layer}' does not exist. Use add_layer to add a new layer."
        )


class DependencyExistsError(ConfigurationError):
    def __init__(self, independent: str, dependent: str) -> None:
        self.independent = independent
        self.dependent = dependent
        super().__init__(
            f"A dependency '{independent}' -> '{dependent}' already exists. "
            f"Use remove_dependency or set_dependency to modify it."
        )


class DependencyNotFoundError(ConfigurationError):
    def __init__(self, independent: str, dependent: str) -> None:
        self.independent = independent
        self.dependent = dependent
        super().__init__(
            f"A dependency '{independent}' -> '{dependent}' does not exist. "
            f"Use add_dependency to add a new dependency."
        )


# --- Shape -------------------------------------------------------------------

class ShapeError(DomainKnowledgeError, ValueError):
    """A dependency table is not rectangular or does not fit its two layers."""


# --- Structure ---------------------------------------------------------------

class CycleError(DomainKnowledgeError):
    """Adding a dependency would make the layer graph cyclic."""

    def __init__(self, independent: str, dependent: str) -> None:
        self.independent = independent
        self.dependent = dependent
        super().__init__(
            f"Dependency '{independent}' -> '{dependent}' could not be created "
            f"as it would cause the existing dependencies to form a cycle."
        )


# --- Data --------------------------------------------------------------------

class DataError(DomainKnowledgeError):
    """Projection found data it cannot turn into a variable graph."""


class DuplicateVariableError(DataError):
    def __init__(self, variable: str, layer: str, other_layer: str) -> None:
        self.variable = variable
        self.layer = layer
        self.other_layer = other_layer
        super().__init__(
            f"Duplicate detected! Variable '{variable}' occurs in '{layer}' "
            f"even though a variable with that name exists in '{other_layer}'."
        )


class UnsetCellError(DataError):
    def __init__(self, independent: str, dependent: str, row: int, column: int) -> None:
        self.independent = independent
        self.dependent = dependent
        self.row = row
        self.column = column
        super().__init__(
            f"Cell [{row}][{column}] of the dependency table "
            f"'{independent}' -> '{dependent}' has never been filled."
        )


# --- Numeric -----------------------------------------------------------------

class NumericError(DomainKnowledgeError, ArithmeticError):
    """The dependency score is undefined for the given series."""


class InsufficientDataError(NumericError):
    def __init__(self, observed: int, required: int) -> None:
        self.observed = observed
        self.required = required
        super().__init__(
            f"Only {observed} fully observed pairs; at least {required} are required."
        )


class ZeroVarianceError(NumericError):
    def __init__(self) -> None:
        super().__init__("The independent series has zero variance over the observed pairs.")


class ZeroMeanError(NumericError):
    def __init__(self) -> None:
        super().__init__("The dependent series has a mean of zero over the observed pairs.")


class ScoreRangeError(NumericError):
    def __init__(self, value: float, y_mean: float) -> None:
        self.value = value
        self.y_mean = y_mean
        super().__init__(
            f"Score {value:.6g} lies outside [0, 1] (mean of the dependent series is {y_mean:.6g}); "
            f"the series are too noisy or the dependent mean is negative."
        )


class SizeMismatchError(DomainKnowledgeError, ValueError):
    def __init__(self, left: int, right: int, what: Optional[str] = None) -> None:
        self.left = left
        self.right = right
        subject = what or "Both series"
        super().__init__(
            f"{subject} must have the same number of elements (got {left} and {right})."
        )

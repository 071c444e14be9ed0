"""
Table Plotting
Heat-map rendering of a single dependency table for visual inspection.
"""
from __future__ import annotations

from typing import Optional, Sequence

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from layeredknowledge.model.tables import DependencyTable


def plot_dependency_table(
    table: DependencyTable,
    row_labels: Optional[Sequence[str]] = None,
    column_labels: Optional[Sequence[str]] = None,
    title: str = "Dependency Table",
    ax: Optional[Axes] = None,
    show: bool = False,
) -> Axes:
    """
    Draw a dependency table as a heat map.

    Unset and insufficient-evidence cells are left blank.

    Args:
        table: The table to draw.
        row_labels: Names of the independent variables (rows).
        column_labels: Names of the dependent variables (columns).
        title: Axes title.
        ax: Axes to draw into; a new figure is created if omitted.
        show: Call ``plt.show()`` when done.

    Returns:
        The Axes drawn into.
    """
    if ax is None:
        plt.rcParams["figure.constrained_layout.use"] = True
        _, ax = plt.subplots(figsize=(7, 5))

    image = ax.imshow(table.scores(), cmap="coolwarm", vmin=-1.0, vmax=1.0, aspect="auto")
    ax.figure.colorbar(image, ax=ax, label="Score")

    if row_labels is not None:
        ax.set_yticks(range(table.n_rows), labels=list(row_labels))
    if column_labels is not None:
        ax.set_xticks(range(table.n_columns), labels=list(column_labels), rotation=45, ha="right")

    ax.set_title(title)
    ax.set_xlabel("Dependent variable")
    ax.set_ylabel("Independent variable")

    if show:
        plt.show()
    return ax

"""
Dependency Tables
=================
Defines the per-relation score matrix and the store that owns one matrix per
layer-to-layer relation.

A table for the relation I -> D has one row per variable of I and one column
per variable of D; cell [i, j] holds how strongly the j-th variable of D
depends on the i-th variable of I.

Classes:
    Relation: Hashable (independent, dependent) key.
    DependencyTable: numpy-backed matrix of cells (see ``model.scores``).
    DependencyTableStore: Mapping Relation -> DependencyTable.
"""
from __future__ import annotations

from enum import IntEnum
import logging
from typing import Dict, Iterator, List, NamedTuple, Optional, Sequence, TYPE_CHECKING, Tuple

import numpy as np

from layeredknowledge.errors import ShapeError
from layeredknowledge.model.scores import Cell, INSUFFICIENT_EVIDENCE, normalize_cell

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class Relation(NamedTuple):
    """A directed dependency between two layers, I -> D."""
    independent: str
    dependent: str

    def __str__(self) -> str:
        return f"{self.independent} -> {self.dependent}"


class CellState(IntEnum):
    UNSET = 0
    SCORED = 1
    INSUFFICIENT = 2


class DependencyTable:
    """
    Rectangular matrix of dependency scores.

    Scores live in a float array; a parallel state array records whether a
    cell is unset, scored, or marked as insufficient evidence. Reading a cell
    returns ``None``, a ``float`` or ``INSUFFICIENT_EVIDENCE`` respectively.
    """
    __hash__ = None  # mutable

    def __init__(self, n_rows: int, n_columns: int) -> None:
        """
        Initialize an all-unset table.

        Args:
            n_rows: Number of variables in the independent layer.
            n_columns: Number of variables in the dependent layer.
        """
        if n_rows < 0 or n_columns < 0:
            raise ShapeError(f"Table dimensions must be non-negative, got ({n_rows}, {n_columns}).")
        self._values: npt.NDArray[np.float64] = np.zeros((n_rows, n_columns), dtype=np.float64)
        self._states: npt.NDArray[np.int8] = np.full((n_rows, n_columns), CellState.UNSET, dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[object]]) -> DependencyTable:
        """
        Build a table from a nested sequence, one inner sequence per row.

        Raises:
            ShapeError: If the rows are not all the same length, or a cell is
                not a valid score (see ``normalize_cell``).
        """
        if isinstance(rows, DependencyTable):
            return rows.copy()

        n_rows = len(rows)
        n_columns = len(rows[0]) if n_rows > 0 else 0
        for i, row in enumerate(rows):
            if len(row) != n_columns:
                raise ShapeError(
                    f"Dependency table is not rectangular (row 0 has {n_columns} columns, "
                    f"but row {i} has {len(row)} columns)."
                )

        table = cls(n_rows, n_columns)
        for i, row in enumerate(rows):
            for j, value in enumerate(row):
                table[i, j] = value
        return table

    # --- Dimensions ---

    @property
    def shape(self) -> Tuple[int, int]:
        return self._values.shape

    @property
    def n_rows(self) -> int:
        return self._values.shape[0]

    @property
    def n_columns(self) -> int:
        return self._values.shape[1]

    # --- Cell access ---

    def __getitem__(self, index: Tuple[int, int]) -> Cell:
        i, j = index
        state = self._states[i, j]
        if state == CellState.UNSET:
            return None
        if state == CellState.INSUFFICIENT:
            return INSUFFICIENT_EVIDENCE
        return float(self._values[i, j])

    def __setitem__(self, index: Tuple[int, int], value: object) -> None:
        i, j = index
        cell = normalize_cell(value)
        if cell is None:
            self._states[i, j] = CellState.UNSET
            self._values[i, j] = 0.0
        elif cell is INSUFFICIENT_EVIDENCE:
            self._states[i, j] = CellState.INSUFFICIENT
            self._values[i, j] = 0.0
        else:
            self._states[i, j] = CellState.SCORED
            self._values[i, j] = cell

    def rows(self) -> List[List[Cell]]:
        """Return the table as a list of rows of cell values."""
        return [[self[i, j] for j in range(self.n_columns)] for i in range(self.n_rows)]

    def clear(self) -> None:
        """Reset every cell to unset."""
        self._values.fill(0.0)
        self._states.fill(CellState.UNSET)

    # --- Queries ---

    def is_complete(self) -> bool:
        """True when no cell is unset."""
        return not np.any(self._states == CellState.UNSET)

    def scores(self) -> np.ma.MaskedArray:
        """Scores as a masked array; unset and insufficient cells are masked."""
        return np.ma.masked_array(self._values.copy(), mask=self._states != CellState.SCORED)

    def copy(self) -> DependencyTable:
        table = DependencyTable(self.n_rows, self.n_columns)
        table._values = self._values.copy()
        table._states = self._states.copy()
        return table

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DependencyTable):
            if not isinstance(other, (list, tuple)):
                return NotImplemented
            try:
                other = DependencyTable.from_rows(other)
            except (ShapeError, TypeError):
                return False

        if self.shape != other.shape or not np.array_equal(self._states, other._states):
            return False
        scored = self._states == CellState.SCORED
        return bool(np.array_equal(self._values[scored], other._values[scored]))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.rows()!r})"


class DependencyTableStore:
    """
    Owns exactly one table per relation.

    The store knows nothing about layers; the caller passes the live
    (rows, columns) shape whenever a table is created or validated.
    """
    def __init__(self) -> None:
        self._tables: Dict[Relation, DependencyTable] = {}

    def __len__(self) -> int:
        return len(self._tables)

    def __contains__(self, relation: object) -> bool:
        return relation in self._tables

    def __iter__(self) -> Iterator[Relation]:
        return iter(self._tables)

    def get(self, relation: Relation) -> Optional[DependencyTable]:
        return self._tables.get(relation)

    def create_empty(self, relation: Relation, shape: Tuple[int, int]) -> Optional[DependencyTable]:
        """
        Store a fresh all-unset table for ``relation``.

        Returns:
            The table previously stored for the relation, if any.
        """
        previous = self._tables.get(relation)
        self._tables[relation] = DependencyTable(*shape)
        logger.debug(f"Initialized {shape[0]}x{shape[1]} table for {relation}.")
        return previous

    @staticmethod
    def right_size(table: DependencyTable | Sequence[Sequence[object]],
                   shape: Tuple[int, int]) -> DependencyTable:
        """
        Validate a caller-supplied table against the live layer sizes.

        Args:
            table: A DependencyTable or a nested sequence of rows.
            shape: Expected (rows, columns).

        Raises:
            ShapeError: If the input is not rectangular or its dimensions do
                not match ``shape``.

        Returns:
            A new DependencyTable of exactly ``shape``, never ``table`` itself.
            A table with zero rows cannot carry a column count, so it is
            accepted for any number of columns when zero rows are expected.
        """
        # Always a copy: each relation owns its table
        candidate = DependencyTable.from_rows(table)
        rows, columns = shape

        if candidate.n_rows != rows:
            raise ShapeError(
                f"Dependency table has the wrong number of rows (the independent layer has "
                f"{rows} variables, but the table is for {candidate.n_rows} variables)."
            )
        if rows == 0:
            return DependencyTable(0, columns)
        if candidate.n_columns != columns:
            raise ShapeError(
                f"Dependency table has the wrong number of columns (the dependent layer has "
                f"{columns} variables, but the table is for {candidate.n_columns} variables)."
            )
        return candidate

    def put(self, relation: Relation, table: DependencyTable) -> Optional[DependencyTable]:
        """Store an already validated table; return the one it replaces."""
        previous = self._tables.get(relation)
        self._tables[relation] = table
        return previous

    def pop(self, relation: Relation) -> Optional[DependencyTable]:
        return self._tables.pop(relation, None)

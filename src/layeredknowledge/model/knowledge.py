"""
Domain Knowledge (Data Model)
=============================
This module defines the container relating layers of variables.

Why is this file needed?
------------------------
A domain often tells us that broad concepts depend on each other (education
drives production, production drives the economy) without telling us which
*measurable* variables of those concepts are related. This container stores:

1. Layers: a unique, case-sensitive name and an ordered list of variables.
2. Dependency relations: directed layer-to-layer edges, kept acyclic.
3. Dependency tables: one score matrix per relation, row i / column j
   scoring how strongly the j-th dependent variable depends on the i-th
   independent variable.

Typical use builds the layers, adds the relations, fills the tables (see
``analysis.scoring``) and finally projects everything into a variable-level
graph with ``variable_dependency``.

Classes:
    DomainKnowledge: The container.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Set, Tuple, Union

from layeredknowledge.config import DEFAULT_THRESHOLD
from layeredknowledge.errors import (
    CycleError,
    DependencyExistsError,
    DependencyNotFoundError,
    LayerExistsError,
    LayerNotFoundError,
)
from layeredknowledge.model.layer_graph import LayerGraph
from layeredknowledge.model.projection import VariableGraphProjector
from layeredknowledge.model.tables import DependencyTable, DependencyTableStore, Relation
from layeredknowledge.model.variable_graph import VariableGraph

logger = logging.getLogger(__name__)

TableLike = Union[DependencyTable, Sequence[Sequence[object]]]


class DomainKnowledge:
    """
    Layers of variables linked by acyclic, scored dependency relations.

    Invariants (checked by ``is_consistent`` after every mutation):
        * the layer graph's vertices are exactly the declared layers;
        * there is one dependency table per relation;
        * every table is (#independent variables) x (#dependent variables).
    """
    def __init__(self) -> None:
        self._layers: Dict[str, Tuple[str, ...]] = {}
        self._graph = LayerGraph()
        self._tables = DependencyTableStore()

    def __repr__(self) -> str:
        return (f"{self.__class__.__name__}(layers={len(self._layers)}, "
                f"dependencies={self._graph.num_edges})")

    # --- Invariants ---

    def layer_invariant(self) -> bool:
        return self._graph.vertices() == set(self._layers)

    def dependency_invariant(self) -> bool:
        return self._graph.num_edges == len(self._tables) and all(
            self._graph.has_edge(*relation) for relation in self._tables
        )

    def variable_invariant(self) -> bool:
        for independent, dependent in self._graph.edges():
            table = self._tables.get(Relation(independent, dependent))
            if table is None or table.shape != self._shape(independent, dependent):
                return False
        return True

    def is_consistent(self) -> bool:
        return self.layer_invariant() and self.dependency_invariant() and self.variable_invariant()

    # --- Layers ---

    def add_layer(self, name: str, variables: Optional[Sequence[str]] = None) -> None:
        """
        Add a layer with no relations.

        Args:
            name: Unique layer name.
            variables: Ordered variable names. ``None`` or empty declares a
                placeholder layer to be filled later with ``replace_layer``.

        Raises:
            LayerExistsError: If a layer with that name already exists.
        """
        if name in self._layers:
            raise LayerExistsError(name)
        self._layers[name] = tuple(variables or ())
        self._graph.add_vertex(name)
        logger.debug(f"Added layer '{name}' with {len(self._layers[name])} variables.")

        assert self.layer_invariant()

    def contains_layer(self, name: str) -> bool:
        return name in self._layers

    def get_layer(self, name: str) -> Optional[Tuple[str, ...]]:
        """Ordered variables of the layer, or None if it does not exist."""
        return self._layers.get(name)

    def layer_names(self) -> List[str]:
        return list(self._layers)

    def layer_map(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only live view of layer name -> ordered variables."""
        return MappingProxyType(self._layers)

    def remove_layer(self, name: str) -> bool:
        """
        Remove a layer together with every relation touching it.

        Returns:
            True if a layer was removed.
        """
        if name not in self._layers:
            return False

        for independent in self._graph.predecessors(name):
            self._tables.pop(Relation(independent, name))
        for dependent in self._graph.successors(name):
            self._tables.pop(Relation(name, dependent))
        self._graph.remove_vertex(name)
        del self._layers[name]
        logger.debug(f"Removed layer '{name}'.")

        assert self.is_consistent()
        return True

    def replace_layer(self, name: str, variables: Optional[Sequence[str]]) -> Tuple[str, ...]:
        """
        Replace the variables of an existing layer.

        Every table on a relation touching the layer is reset to all-unset,
        since the variable order (and count) may have changed.

        Returns:
            The previous variables of the layer.

        Raises:
            LayerNotFoundError: If the layer does not exist.
        """
        self._layer_must_exist(name)

        previous = self._layers[name]
        self._layers[name] = tuple(variables or ())

        for independent in self._graph.predecessors(name):
            relation = Relation(independent, name)
            self._tables.create_empty(relation, self._shape(*relation))
        for dependent in self._graph.successors(name):
            relation = Relation(name, dependent)
            self._tables.create_empty(relation, self._shape(*relation))
        logger.debug(f"Replaced layer '{name}' ({len(previous)} -> {len(self._layers[name])} variables).")

        assert self.is_consistent()
        return previous

    # --- Dependencies ---

    def add_dependency(self, independent: str, dependent: str, table: Optional[TableLike] = None) -> None:
        """
        Add the relation independent -> dependent.

        Args:
            independent: Layer that ``dependent`` depends on.
            dependent: Layer that depends on ``independent``.
            table: Optional initial dependency table. Without one the
                relation starts with an all-unset table.

        Raises:
            LayerNotFoundError: If either layer does not exist.
            DependencyExistsError: If the relation already exists.
            ShapeError: If ``table`` does not fit the two layers.
            CycleError: If the relation would close a cycle. The container is
                left exactly as it was.
        """
        self._layer_must_exist(independent)
        self._layer_must_exist(dependent)
        if self._graph.has_edge(independent, dependent):
            raise DependencyExistsError(independent, dependent)

        relation = Relation(independent, dependent)
        if table is None:
            self._tables.create_empty(relation, self._shape(independent, dependent))
        else:
            self._tables.put(relation, self._tables.right_size(table, self._shape(independent, dependent)))
        self._graph.add_edge(independent, dependent)

        self._preserve_acyclicity(relation)
        logger.debug(f"Added dependency {relation}.")

        assert self.is_consistent()

    def _preserve_acyclicity(self, relation: Relation) -> None:
        """Undo a provisional insert and raise if it closed a cycle."""
        if self._graph.is_acyclic():
            return

        self._tables.pop(relation)
        self._graph.remove_edge(relation.independent, relation.dependent)
        assert self.is_consistent()

        logger.warning(f"Rejected dependency {relation}: it would form a cycle.")
        raise CycleError(relation.independent, relation.dependent)

    def remove_dependency(self, independent: str, dependent: str) -> Optional[DependencyTable]:
        """
        Remove a relation together with its table.

        Returns:
            The removed table, or None if the relation did not exist.
        """
        if not self._graph.remove_edge(independent, dependent):
            return None

        removed = self._tables.pop(Relation(independent, dependent))
        logger.debug(f"Removed dependency {independent} -> {dependent}.")

        assert self.is_consistent()
        return removed

    def set_dependency(self, independent: str, dependent: str, table: TableLike) -> DependencyTable:
        """
        Replace the table of an existing relation wholesale.

        Returns:
            The previous table.

        Raises:
            LayerNotFoundError: If either layer does not exist.
            DependencyNotFoundError: If the relation does not exist.
            ShapeError: If ``table`` does not fit the two layers.
        """
        self._layer_must_exist(independent)
        self._layer_must_exist(dependent)
        if not self._graph.has_edge(independent, dependent):
            raise DependencyNotFoundError(independent, dependent)

        checked = self._tables.right_size(table, self._shape(independent, dependent))
        previous = self._tables.put(Relation(independent, dependent), checked)

        assert self.variable_invariant()
        return previous

    def contains_dependency(self, independent: str, dependent: str) -> bool:
        return self._graph.has_edge(independent, dependent)

    def get_dependency_table(self, independent: str, dependent: str) -> Optional[DependencyTable]:
        """
        The stored table of independent -> dependent, or None if absent.

        The table is returned by reference so it can be filled in place; its
        shape cannot change that way.
        """
        return self._tables.get(Relation(independent, dependent))

    def get_dependents(self, independent: str) -> Optional[Set[str]]:
        """Layers depending on ``independent``, or None if it does not exist."""
        return self._graph.successors(independent)

    def get_independents(self, dependent: str) -> Optional[Set[str]]:
        """Layers ``dependent`` depends on, or None if it does not exist."""
        return self._graph.predecessors(dependent)

    def dependencies(self) -> List[Relation]:
        return [Relation(u, v) for u, v in self._graph.edges()]

    def unfilled_dependencies(self) -> List[Relation]:
        """Relations whose table still has at least one unset cell."""
        return [relation for relation in self.dependencies() if not self._tables.get(relation).is_complete()]

    def topological_order(self) -> List[str]:
        """Layer names ordered so every relation points forward."""
        return self._graph.topological_order()

    # --- Projection ---

    def variable_dependency(self, threshold: float = DEFAULT_THRESHOLD) -> VariableGraph:
        """
        Project the layers into a graph over variables.

        See ``VariableGraphProjector.project``.
        """
        return VariableGraphProjector().project(self, threshold)

    # --- Helpers ---

    def _layer_must_exist(self, name: str) -> None:
        if name not in self._layers:
            raise LayerNotFoundError(name)

    def _shape(self, independent: str, dependent: str) -> Tuple[int, int]:
        return len(self._layers[independent]), len(self._layers[dependent])

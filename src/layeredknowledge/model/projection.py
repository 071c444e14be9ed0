"""
Variable Graph Projection
=========================
Turns a filled ``DomainKnowledge`` into a ``VariableGraph``: one vertex per
variable, one edge per table cell that reaches the threshold.
"""
from __future__ import annotations

import logging
from typing import Dict, TYPE_CHECKING

from layeredknowledge.config import DEFAULT_THRESHOLD
from layeredknowledge.errors import DuplicateVariableError, UnsetCellError
from layeredknowledge.model.scores import meets_threshold
from layeredknowledge.model.variable_graph import VariableGraph

if TYPE_CHECKING:
    from layeredknowledge.model.knowledge import DomainKnowledge

logger = logging.getLogger(__name__)


class VariableGraphProjector:
    """
    Thresholds the dependency tables of a ``DomainKnowledge`` into a flat
    graph over variable names.

    Variable p of layer P gets an edge to variable v of layer L iff the
    relation P -> L exists and its table cell [index(p), index(v)] is at
    least the threshold. Layer edges fix the direction of every variable
    edge, so the result is acyclic whenever the layer graph is.
    """
    def project(self, knowledge: DomainKnowledge, threshold: float = DEFAULT_THRESHOLD) -> VariableGraph:
        """
        Build the variable graph. Reads ``knowledge`` only.

        Args:
            knowledge: Fully populated container.
            threshold: Minimum score a cell needs to become an edge.

        Raises:
            DuplicateVariableError: If a variable name occurs in two layers
                (or twice in one layer).
            UnsetCellError: If a table cell consulted was never filled.
        """
        graph = VariableGraph()
        owner: Dict[str, str] = {}

        # Parents before children, so every edge source is already a vertex
        for layer in knowledge.topological_order():
            variables = knowledge.get_layer(layer)
            parents = sorted(knowledge.get_independents(layer))

            for j, variable in enumerate(variables):
                if not graph.add_vertex(variable):
                    raise DuplicateVariableError(variable, layer, owner[variable])
                owner[variable] = layer

                for parent in parents:
                    table = knowledge.get_dependency_table(parent, layer)
                    for i, parent_variable in enumerate(knowledge.get_layer(parent)):
                        cell = table[i, j]
                        if cell is None:
                            raise UnsetCellError(parent, layer, i, j)
                        if meets_threshold(cell, threshold):
                            graph.add_edge(parent_variable, variable)

        logger.info(
            f"Projected {len(graph)} variables and {graph.num_edges} edges "
            f"at threshold {threshold}."
        )
        return graph

"""
Structural Clustering
=====================
Groups units (countries, regions, ...) whose projected variable graphs have
the same vertices and edges. Units are compared by ``VariableGraph.signature``.
"""
from __future__ import annotations

from typing import Dict, Hashable, List, Mapping

from layeredknowledge.model.variable_graph import Signature, VariableGraph


def cluster_by_structure(graphs: Mapping[Hashable, VariableGraph]) -> List[List[Hashable]]:
    """
    Group units whose projected variable graphs are structurally identical.

    Args:
        graphs: Unit (e.g. a country) -> variable graph built from its data.

    Returns:
        One list of units per distinct graph. Clusters appear in the order
        their first unit was seen, units keep their input order.
    """
    clusters: Dict[Signature, List[Hashable]] = {}
    for unit, graph in graphs.items():
        clusters.setdefault(graph.signature(), []).append(unit)
    return list(clusters.values())

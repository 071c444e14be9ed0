"""
Layer Graph
===========
Directed graph whose vertices are layer names and whose edges are dependency
relations. It is a plain adjacency structure: ``DomainKnowledge`` decides
when an edge is allowed, this class only stores edges and answers structural
questions (neighbours, topological order, acyclicity).
"""
from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, List, Optional, Set, Tuple

from layeredknowledge.errors import CycleError


class LayerGraph:
    def __init__(self) -> None:
        # Insertion-ordered so that iteration, and therefore projection, is deterministic
        self._successors: Dict[str, Dict[str, None]] = {}
        self._predecessors: Dict[str, Dict[str, None]] = {}
        self._n_edges: int = 0

    def __contains__(self, layer: object) -> bool:
        return layer in self._successors

    def __len__(self) -> int:
        return len(self._successors)

    def __iter__(self) -> Iterator[str]:
        return iter(self._successors)

    @property
    def num_edges(self) -> int:
        return self._n_edges

    def vertices(self) -> Set[str]:
        return set(self._successors)

    def edges(self) -> List[Tuple[str, str]]:
        return [(u, v) for u, targets in self._successors.items() for v in targets]

    # --- Mutation ---

    def add_vertex(self, layer: str) -> bool:
        """Add an isolated vertex. Returns False if it already existed."""
        if layer in self._successors:
            return False
        self._successors[layer] = {}
        self._predecessors[layer] = {}
        return True

    def remove_vertex(self, layer: str) -> bool:
        """Remove a vertex and every edge touching it. Returns False if absent."""
        if layer not in self._successors:
            return False
        for target in list(self._successors[layer]):
            self.remove_edge(layer, target)
        for source in list(self._predecessors[layer]):
            self.remove_edge(source, layer)
        del self._successors[layer]
        del self._predecessors[layer]
        return True

    def add_edge(self, source: str, target: str) -> bool:
        """
        Add the edge source -> target.

        Both vertices must already exist. No acyclicity check is made here.

        Returns:
            False if the edge already existed.
        """
        if target in self._successors[source]:
            return False
        self._successors[source][target] = None
        self._predecessors[target][source] = None
        self._n_edges += 1
        return True

    def remove_edge(self, source: str, target: str) -> bool:
        """Remove the edge source -> target. Returns False if it did not exist."""
        if source not in self._successors or target not in self._successors[source]:
            return False
        del self._successors[source][target]
        del self._predecessors[target][source]
        self._n_edges -= 1
        return True

    # --- Queries ---

    def has_edge(self, source: str, target: str) -> bool:
        return source in self._successors and target in self._successors[source]

    def successors(self, layer: str) -> Optional[Set[str]]:
        """Layers that depend on ``layer``, or None if the layer is unknown."""
        targets = self._successors.get(layer)
        return None if targets is None else set(targets)

    def predecessors(self, layer: str) -> Optional[Set[str]]:
        """Layers that ``layer`` depends on, or None if the layer is unknown."""
        sources = self._predecessors.get(layer)
        return None if sources is None else set(sources)

    def topological_order(self) -> List[str]:
        """
        Order the layers so that every edge points forward (Kahn's algorithm).

        Ties are broken by insertion order.

        Raises:
            CycleError: If the graph contains a cycle.
        """
        in_degree: Dict[str, int] = {layer: len(sources) for layer, sources in self._predecessors.items()}
        queue = deque(layer for layer, degree in in_degree.items() if degree == 0)

        order: List[str] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._successors[current]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        if len(order) != len(self._successors):
            processed = set(order)
            stuck = next(layer for layer, degree in in_degree.items() if degree > 0)
            source = next(s for s in self._predecessors[stuck] if s not in processed)
            raise CycleError(source, stuck)

        return order

    def is_acyclic(self) -> bool:
        try:
            self.topological_order()
        except CycleError:
            return False
        return True

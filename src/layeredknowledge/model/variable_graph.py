"""
Variable Graph
==============
Flat directed graph over individual variable names, produced by projecting a
``DomainKnowledge`` at a threshold. Each projection builds a new instance, so
callers may mutate it freely.
"""
from __future__ import annotations

from collections import deque
from typing import Dict, FrozenSet, Iterable, List, Set, Tuple

# Hashable fingerprint: (vertices, edges)
Signature = Tuple[FrozenSet[str], FrozenSet[Tuple[str, str]]]


class VariableGraph:
    __hash__ = None  # mutable; use signature() as a dictionary key

    def __init__(self, vertices: Iterable[str] = (), edges: Iterable[Tuple[str, str]] = ()) -> None:
        self._successors: Dict[str, Dict[str, None]] = {}
        self._predecessors: Dict[str, Dict[str, None]] = {}
        for vertex in vertices:
            self.add_vertex(vertex)
        for source, target in edges:
            self.add_edge(source, target)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(vertices={len(self)}, edges={self.num_edges})"

    def __len__(self) -> int:
        return len(self._successors)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._successors

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VariableGraph):
            return NotImplemented
        return self.signature() == other.signature()

    @property
    def vertices(self) -> List[str]:
        """Vertices in insertion order."""
        return list(self._successors)

    @property
    def edges(self) -> List[Tuple[str, str]]:
        return [(u, v) for u, targets in self._successors.items() for v in targets]

    @property
    def num_edges(self) -> int:
        return sum(len(targets) for targets in self._successors.values())

    def add_vertex(self, vertex: str) -> bool:
        """Returns False if the vertex was already present."""
        if vertex in self._successors:
            return False
        self._successors[vertex] = {}
        self._predecessors[vertex] = {}
        return True

    def add_edge(self, source: str, target: str) -> bool:
        """
        Add source -> target. Both endpoints must already be vertices.

        Raises:
            KeyError: If either endpoint is missing.

        Returns:
            False if the edge was already present.
        """
        for vertex in (source, target):
            if vertex not in self._successors:
                raise KeyError(f"Vertex '{vertex}' is not in the graph.")
        if target in self._successors[source]:
            return False
        self._successors[source][target] = None
        self._predecessors[target][source] = None
        return True

    def has_edge(self, source: str, target: str) -> bool:
        return source in self._successors and target in self._successors[source]

    def successors(self, vertex: str) -> Set[str]:
        return set(self._successors[vertex])

    def predecessors(self, vertex: str) -> Set[str]:
        return set(self._predecessors[vertex])

    def topological_order(self) -> List[str]:
        """
        Raises:
            ValueError: If the graph has a cycle.
        """
        in_degree = {vertex: len(sources) for vertex, sources in self._predecessors.items()}
        queue = deque(vertex for vertex, degree in in_degree.items() if degree == 0)
        order: List[str] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._successors[current]:
                in_degree[neighbor] -= 1
                if in_degree[neighbor] == 0:
                    queue.append(neighbor)

        if len(order) != len(self._successors):
            raise ValueError("Variable graph contains a cycle.")
        return order

    def is_acyclic(self) -> bool:
        try:
            self.topological_order()
        except ValueError:
            return False
        return True

    def signature(self) -> Signature:
        return frozenset(self._successors), frozenset(self.edges)

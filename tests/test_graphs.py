import pytest

from layeredknowledge import VariableGraph, cluster_by_structure
from layeredknowledge.errors import CycleError
from layeredknowledge.model.layer_graph import LayerGraph


class TestLayerGraph:
    def test_insertion_order_breaks_ties(self):
        graph = LayerGraph()
        for layer in ("C", "A", "B"):
            graph.add_vertex(layer)
        graph.add_edge("B", "C")

        assert graph.topological_order() == ["A", "B", "C"]

    def test_edge_bookkeeping(self):
        graph = LayerGraph()
        graph.add_vertex("A")
        graph.add_vertex("B")

        assert graph.add_edge("A", "B") is True
        assert graph.add_edge("A", "B") is False
        assert graph.num_edges == 1
        assert graph.successors("A") == {"B"}
        assert graph.predecessors("B") == {"A"}
        assert graph.successors("missing") is None

        assert graph.remove_edge("A", "B") is True
        assert graph.remove_edge("A", "B") is False
        assert graph.num_edges == 0

    def test_remove_vertex_drops_incident_edges(self):
        graph = LayerGraph()
        for layer in ("A", "B", "C"):
            graph.add_vertex(layer)
        graph.add_edge("A", "B")
        graph.add_edge("B", "C")

        assert graph.remove_vertex("B") is True
        assert graph.num_edges == 0
        assert graph.vertices() == {"A", "C"}
        assert "B" not in graph
        assert len(graph) == 2
        assert list(graph) == ["A", "C"]

    def test_cycle_reports_an_edge_on_it(self):
        graph = LayerGraph()
        for layer in ("root", "A", "B"):
            graph.add_vertex(layer)
        graph.add_edge("root", "A")
        graph.add_edge("A", "B")
        graph.add_edge("B", "A")

        with pytest.raises(CycleError) as info:
            graph.topological_order()

        assert (info.value.independent, info.value.dependent) in {("A", "B"), ("B", "A")}
        assert not graph.is_acyclic()


class TestVariableGraph:
    def test_edges_need_vertices(self):
        graph = VariableGraph(["x"])

        with pytest.raises(KeyError):
            graph.add_edge("x", "y")

    def test_duplicates_are_ignored(self):
        graph = VariableGraph(["x", "y"], [("x", "y")])

        assert graph.add_vertex("x") is False
        assert graph.add_edge("x", "y") is False
        assert graph.num_edges == 1

    def test_equality_ignores_insertion_order(self):
        first = VariableGraph(["x", "y"], [("x", "y")])
        second = VariableGraph(["y", "x"], [("x", "y")])

        assert first == second
        assert first.signature() == second.signature()
        assert first != VariableGraph(["x", "y"])

    def test_is_not_hashable(self):
        with pytest.raises(TypeError):
            hash(VariableGraph())

    def test_cycle_detection(self):
        graph = VariableGraph(["x", "y"], [("x", "y"), ("y", "x")])

        assert not graph.is_acyclic()
        with pytest.raises(ValueError):
            graph.topological_order()


class TestClusterByStructure:
    def test_groups_identical_graphs(self):
        edge = VariableGraph(["x", "y"], [("x", "y")])
        reverse = VariableGraph(["x", "y"], [("y", "x")])
        graphs = {
            "DE": edge,
            "FR": reverse,
            "IT": VariableGraph(["y", "x"], [("x", "y")]),
            "PL": VariableGraph(["x", "y"], [("y", "x")]),
            "ES": VariableGraph(["x", "y"]),
        }

        assert cluster_by_structure(graphs) == [["DE", "IT"], ["FR", "PL"], ["ES"]]

    def test_empty_input(self):
        assert cluster_by_structure({}) == []

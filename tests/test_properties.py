"""Property-based tests for the layer container under random edit sequences."""

from hypothesis import given, strategies as st

from layeredknowledge import DomainKnowledge
from layeredknowledge.errors import CycleError, DependencyExistsError

LAYERS = ["L0", "L1", "L2", "L3", "L4"]

layer_names = st.sampled_from(LAYERS)
operations = st.lists(
    st.tuples(st.sampled_from(["add", "remove"]), layer_names, layer_names),
    max_size=40,
)


def _fresh_knowledge() -> DomainKnowledge:
    dk = DomainKnowledge()
    for i, name in enumerate(LAYERS):
        dk.add_layer(name, [f"{name.lower()}_{k}" for k in range(i % 3)])
    return dk


@given(operations)
def test_random_edits_keep_the_container_consistent(ops):
    dk = _fresh_knowledge()
    for op, independent, dependent in ops:
        if op == "add":
            try:
                dk.add_dependency(independent, dependent)
            except (CycleError, DependencyExistsError):
                pass
        else:
            dk.remove_dependency(independent, dependent)

        assert dk.is_consistent()
        order = dk.topological_order()
        position = {name: i for i, name in enumerate(order)}
        for relation in dk.dependencies():
            assert position[relation.independent] < position[relation.dependent]
            assert dk.get_dependency_table(*relation) is not None


@given(operations)
def test_rejected_cycle_leaves_relations_unchanged(ops):
    dk = _fresh_knowledge()
    for _, independent, dependent in ops:
        before = set(dk.dependencies())
        try:
            dk.add_dependency(independent, dependent)
        except CycleError:
            assert set(dk.dependencies()) == before
        except DependencyExistsError:
            assert set(dk.dependencies()) == before


@given(st.lists(st.tuples(layer_names, layer_names), max_size=20))
def test_projection_of_acyclic_layers_is_acyclic(pairs):
    dk = _fresh_knowledge()
    for independent, dependent in pairs:
        try:
            dk.add_dependency(independent, dependent)
        except (CycleError, DependencyExistsError):
            continue
        table = dk.get_dependency_table(independent, dependent)
        for i in range(table.n_rows):
            for j in range(table.n_columns):
                table[i, j] = 0.5

    graph = dk.variable_dependency(0.5)

    assert graph.is_acyclic()
    assert len(graph) == sum(len(variables) for variables in dk.layer_map().values())

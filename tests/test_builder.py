import pytest

from layeredknowledge import INSUFFICIENT_EVIDENCE, Relation, build_knowledge, fill_dependencies, score_matrix
from layeredknowledge.errors import CycleError

COLUMNS = {
    "gdp": [1.0, 2.0, 3.0, 4.0, 5.0],
    "rnd": [2.0, 4.5, 5.5, 8.5, 9.5],
    "patents": [1.0, 9.0, 1.0, 9.0, 1.0],
}


def test_build_without_data_leaves_tables_unset():
    dk = build_knowledge({"Economy": ["gdp"], "Research": ["rnd", "patents"]}, [("Economy", "Research")])

    assert dk.layer_names() == ["Economy", "Research"]
    assert dk.unfilled_dependencies() == [Relation("Economy", "Research")]


def test_build_with_data_fills_every_table():
    dk = build_knowledge(
        {"Economy": ["gdp"], "Research": ["rnd", "patents"]},
        [("Economy", "Research")],
        COLUMNS,
    )

    table = dk.get_dependency_table("Economy", "Research")
    assert table == score_matrix([COLUMNS["gdp"]], [COLUMNS["rnd"], COLUMNS["patents"]])
    assert table[0, 1] is INSUFFICIENT_EVIDENCE
    assert dk.unfilled_dependencies() == []


def test_build_propagates_cycles():
    with pytest.raises(CycleError):
        build_knowledge({"A": ["gdp"], "B": ["rnd"]}, [("A", "B"), ("B", "A")])


def test_fill_returns_replaced_tables():
    dk = build_knowledge({"A": ["gdp"], "B": ["rnd"]}, [("A", "B")])

    replaced = fill_dependencies(dk, COLUMNS, minimum=0.0)

    assert list(replaced) == [Relation("A", "B")]
    assert replaced[Relation("A", "B")] == [[None]]
    assert dk.get_dependency_table("A", "B").is_complete()


def test_missing_column_leaves_container_untouched():
    dk = build_knowledge(
        {"A": ["gdp"], "B": ["rnd"], "C": ["unknown"]},
        [("A", "B"), ("B", "C")],
    )

    with pytest.raises(KeyError, match="unknown"):
        fill_dependencies(dk, COLUMNS)

    assert dk.get_dependency_table("A", "B") == [[None]]
    assert len(dk.unfilled_dependencies()) == 2

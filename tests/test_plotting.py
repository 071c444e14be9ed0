import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from layeredknowledge import INSUFFICIENT_EVIDENCE, DependencyTable  # noqa: E402
from layeredknowledge.view.plotting import plot_dependency_table  # noqa: E402


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_draws_into_new_axes():
    table = DependencyTable.from_rows([[0.4, None], [INSUFFICIENT_EVIDENCE, -0.2]])

    ax = plot_dependency_table(table, ["gdp", "rnd"], ["patents", "exports"], title="Economy -> Research")

    assert ax.get_title() == "Economy -> Research"
    assert [label.get_text() for label in ax.get_xticklabels()] == ["patents", "exports"]
    assert len(ax.images) == 1


def test_draws_into_given_axes():
    _, ax = plt.subplots()

    assert plot_dependency_table(DependencyTable.from_rows([[0.1]]), ax=ax) is ax

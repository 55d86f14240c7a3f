"""Tests for field plotting helpers."""

import numpy as np
import pytest

from convection1d.pde.grid import uniform_grid
from convection1d.pde.initial import hat_function


@pytest.fixture
def plt():
    pytest.importorskip("matplotlib")
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as pyplot

    yield pyplot
    pyplot.close("all")


def test_plot_field_draws_one_line(plt):
    from convection1d.viz import plot_field

    grid = uniform_grid(0.0, 2.0, 81)
    u = hat_function(grid)
    ax = plot_field(grid, u, title="Initial conditions")

    lines = ax.get_lines()
    assert len(lines) == 1
    np.testing.assert_array_equal(lines[0].get_xdata(), grid.x)
    np.testing.assert_array_equal(lines[0].get_ydata(), u)
    assert ax.get_title() == "Initial conditions"
    assert ax.get_xlabel() == "x"
    assert ax.get_ylabel() == "u"
    assert ax.get_legend() is None


def test_plot_field_uses_given_axes(plt):
    from convection1d.viz import plot_field

    grid = uniform_grid(0.0, 1.0, 5)
    _, ax = plt.subplots()
    assert plot_field(grid, np.ones(5), ax=ax) is ax
    assert ax.get_title() == "Solution"


def test_plot_field_rejects_mismatched_length(plt):
    from convection1d.viz import plot_field

    grid = uniform_grid(0.0, 1.0, 5)
    with pytest.raises(ValueError):
        plot_field(grid, np.ones(4))


def test_plot_initial_and_solution(plt):
    from convection1d.viz import plot_initial_and_solution

    grid = uniform_grid(0.0, 2.0, 81)
    u0 = hat_function(grid)
    ax_initial, ax_final = plot_initial_and_solution(grid, u0, np.roll(u0, 25))
    assert ax_initial.get_title() == "Initial conditions"
    assert ax_final.get_title() == "Solution"

"""Line plots of convection fields.

Matplotlib is an optional dependency; the plotting functions raise
RuntimeError when it is not installed.
"""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from ..pde.grid import Grid

try:
    from matplotlib import pyplot as plt
    from matplotlib.axes import Axes
    HAS_MATPLOTLIB = True
except ImportError:
    HAS_MATPLOTLIB = False
    if False:
        from matplotlib.axes import Axes


def _require_matplotlib() -> None:
    if not HAS_MATPLOTLIB:
        raise RuntimeError(
            "matplotlib required for plotting; install with pip install matplotlib"
        )


def plot_field(
    grid: Grid,
    u: Sequence[float],
    title: str = "Solution",
    ax: Optional["Axes"] = None,
    linewidth: float = 3.0,
) -> "Axes":
    """
    Plot a field against the grid coordinates.

    Parameters
    ----------
    grid:
        Grid the field is defined on.
    u:
        Field values, one per grid point.
    title:
        Axes title.
    ax:
        Matplotlib axes to plot on. If None, creates a new figure.
    linewidth:
        Line width of the curve.

    Returns
    -------
    matplotlib.axes.Axes
        The axes object used for plotting.

    Raises
    ------
    ValueError
        If `u` does not have one value per grid point.
    RuntimeError
        If matplotlib is not installed.
    """
    _require_matplotlib()

    values = np.asarray(u, dtype=float)
    if values.shape != (grid.nx,):
        raise ValueError(f"u must have shape ({grid.nx},), got {values.shape}")

    if ax is None:
        fig, ax = plt.subplots(figsize=(6, 4))

    ax.plot(grid.x, values, lw=linewidth)
    ax.set_title(title)
    ax.set_xlabel("x")
    ax.set_ylabel("u")
    return ax


def plot_initial_and_solution(
    grid: Grid,
    initial: Sequence[float],
    final: Sequence[float],
) -> tuple["Axes", "Axes"]:
    """Plot the initial condition and the advanced solution side by side."""
    _require_matplotlib()

    fig, (ax_initial, ax_final) = plt.subplots(1, 2, figsize=(12, 4), sharey=True)
    plot_field(grid, initial, title="Initial conditions", ax=ax_initial)
    plot_field(grid, final, title="Solution", ax=ax_final)
    fig.tight_layout()
    return ax_initial, ax_final

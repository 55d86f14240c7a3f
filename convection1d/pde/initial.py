"""
Initial conditions for the convection solver.
"""

from __future__ import annotations

import math

import numpy as np

from .grid import Grid

# Coordinates within this many cells of a hat edge count as on the edge.
_INDEX_TOL = 1e-9


def constant_field(grid: Grid, value: float = 1.0) -> np.ndarray:
    """Return a field equal to `value` at every grid point."""
    return np.full(grid.nx, float(value), dtype=float)


def hat_index_bounds(grid: Grid, left: float, right: float) -> tuple[int, int]:
    """
    Return the inclusive index range ``(lo, hi)`` of grid points in ``[left, right]``.

    The range may be empty (``lo > hi``) when the interval falls between grid
    points or outside the domain; indices are clipped to the grid.
    """
    if left > right:
        raise ValueError(f"left must not exceed right, got {left} > {right}")

    lo = math.ceil((left - grid.x_left) / grid.dx - _INDEX_TOL)
    hi = math.floor((right - grid.x_left) / grid.dx + _INDEX_TOL)
    return max(lo, 0), min(hi, grid.nx - 1)


def hat_function(
    grid: Grid,
    left: float = 0.5,
    right: float = 1.0,
    low: float = 1.0,
    high: float = 2.0,
) -> np.ndarray:
    """
    Piecewise-constant "hat": `high` on ``[left, right]`` and `low` elsewhere.

    With the default 81-point grid on [0, 2] the plateau covers indices
    20 through 40.

    Parameters
    ----------
    grid:
        Grid the field is defined on.
    left, right:
        Plateau bounds in x. Grid points lying on a bound are included.
    low, high:
        Background and plateau levels.

    Returns
    -------
    np.ndarray
        Field of shape (grid.nx,).
    """
    u = constant_field(grid, low)
    lo, hi = hat_index_bounds(grid, left, right)
    if lo <= hi:
        u[lo : hi + 1] = float(high)
    return u

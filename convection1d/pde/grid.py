"""
Uniform 1D grid used by the convection solver.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .utils import linspace_grid


@dataclass(frozen=True)
class Grid:
    """
    Evenly spaced coordinates over ``[x_left, x_right]``.

    The coordinate array is stored read-only, so a ``Grid`` cannot change
    after construction. Use :func:`uniform_grid` to build one.

    Attributes:
        x: 1D array of shape (nx,) with the grid coordinates.
        dx: Spacing between adjacent points.
    """

    x: np.ndarray
    dx: float

    def __post_init__(self) -> None:
        x = np.array(self.x, dtype=float)
        if x.ndim != 1:
            raise ValueError(f"x must be a 1D array, got shape {x.shape}")
        if x.shape[0] < 2:
            raise ValueError(f"a grid needs at least 2 points, got {x.shape[0]}")
        if not np.allclose(np.diff(x), self.dx, rtol=1e-6, atol=0.0):
            raise ValueError(f"x is not evenly spaced by dx={self.dx}")
        x.setflags(write=False)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "dx", float(self.dx))

    @property
    def nx(self) -> int:
        return int(self.x.shape[0])

    @property
    def x_left(self) -> float:
        return float(self.x[0])

    @property
    def x_right(self) -> float:
        return float(self.x[-1])

    def __len__(self) -> int:
        return self.nx


def uniform_grid(x_left: float, x_right: float, nx: int) -> Grid:
    """Build a :class:`Grid` of ``nx`` points with spacing (x_right - x_left) / (nx - 1)."""
    x = linspace_grid(x_left, x_right, nx)
    dx = (float(x_right) - float(x_left)) / (int(nx) - 1)
    return Grid(x=x, dx=dx)

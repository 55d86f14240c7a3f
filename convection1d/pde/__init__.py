"""
Explicit finite-difference solution of the 1D linear convection equation.

The module provides:

* `ConvectionStepper` – first-order upwind time stepping with the left
  boundary value held fixed, on a loop, vectorized NumPy or torch backend.
* `Grid` / `uniform_grid` – immutable uniform grids.
* `hat_function` / `constant_field` – textbook initial conditions.
* CFL utilities to reason about stability of the explicit scheme.

The stepper performs no stability check. With Courant number 1 the scheme
translates the field exactly one cell per step.

Example
-------
>>> import numpy as np
>>> from convection1d.pde import ConvectionStepper, hat_function, uniform_grid
>>>
>>> grid = uniform_grid(0.0, 2.0, 81)
>>> u0 = hat_function(grid, left=0.5, right=1.0, low=1.0, high=2.0)
>>> stepper = ConvectionStepper(c=1.0, dx=grid.dx, dt=0.025)
>>> u = stepper.advance(u0, 25)
>>> [int(i) for i in np.flatnonzero(u == 2.0)[[0, -1]]]
[45, 65]
"""

from .grid import Grid, uniform_grid
from .initial import constant_field, hat_function, hat_index_bounds
from .stepper import Backend, ConvectionStepper, upwind_step
from .utils import (
    compute_cfl,
    courant_number,
    is_stable_explicit,
    is_upwind_stable,
    linspace_grid,
)

__all__ = [
    "Backend",
    "ConvectionStepper",
    "Grid",
    "compute_cfl",
    "constant_field",
    "courant_number",
    "hat_function",
    "hat_index_bounds",
    "is_stable_explicit",
    "is_upwind_stable",
    "linspace_grid",
    "uniform_grid",
    "upwind_step",
]

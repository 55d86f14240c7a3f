"""
Courant-number helpers and grid coordinates for the upwind convection scheme.
"""

from __future__ import annotations

import numpy as np


def courant_number(c: float, dx: float, dt: float) -> float:
    """
    Return the signed Courant number c dt / dx.

    `dx` is not validated: ``dx == 0`` yields ``inf`` or ``nan`` without a
    warning.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(c) * np.float64(dt) / np.float64(dx))


def compute_cfl(dx: float, dt: float, wave_speed: float) -> float:
    """Return the Courant–Friedrichs–Lewy number |c| dt / dx for positive dx and dt."""
    if dx <= 0.0 or dt <= 0.0:
        raise ValueError("dx and dt must be positive.")
    return abs(courant_number(wave_speed, dx, dt))


def is_stable_explicit(cfl: float, limit: float = 1.0) -> bool:
    """Return True if an explicit scheme is stable under the provided limit."""
    return cfl <= limit + 1e-12


def is_upwind_stable(courant: float) -> bool:
    """
    Return True if the backward-difference upwind update does not amplify.

    The stencil looks left, so it is stable only for a signed Courant number
    in [0, 1]; a negative wave speed needs the opposite stencil.
    """
    return courant >= 0.0 and is_stable_explicit(courant)


def linspace_grid(x0: float, x1: float, nx: int) -> np.ndarray:
    """Create a uniform grid with `nx` points between `x0` and `x1`."""
    if nx < 2:
        raise ValueError("nx must be at least 2 to form a grid.")
    return np.linspace(float(x0), float(x1), int(nx))

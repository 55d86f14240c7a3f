"""Run a convection simulation end to end from a :class:`SimulationConfig`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
import torch

from .config import SimulationConfig
from .logging import get_logger
from .pde.grid import Grid, uniform_grid
from .pde.initial import hat_function
from .pde.stepper import ConvectionStepper
from .pde.utils import is_upwind_stable

logger = get_logger(__name__)


@dataclass(frozen=True)
class SimulationResult:
    """
    Outcome of a convection run.

    Fields are plain NumPy arrays regardless of the stepper backend.

    Attributes:
        grid: Grid the fields are defined on.
        initial: Initial condition, shape (nx,).
        final: Field after `num_steps` updates, shape (nx,).
        num_steps: Number of updates applied.
        courant: Signed Courant number c dt / dx.
        history: All time levels, shape (num_steps + 1, nx), if requested.
    """

    grid: Grid
    initial: np.ndarray
    final: np.ndarray
    num_steps: int
    courant: float
    history: Optional[np.ndarray] = None


def _to_numpy(values) -> np.ndarray:
    if isinstance(values, torch.Tensor):
        return values.detach().cpu().numpy().astype(float)
    return np.asarray(values, dtype=float)


def run_simulation(
    config: Optional[SimulationConfig] = None,
    store_history: bool = False,
) -> SimulationResult:
    """
    Build the grid and hat initial condition, then advance it in time.

    An unstable Courant number is reported as a warning; the run proceeds.

    Args:
        config: Run parameters. Defaults to the textbook setup.
        store_history: Keep every time level in the result.

    Returns:
        A :class:`SimulationResult`.
    """
    if config is None:
        config = SimulationConfig()

    grid = uniform_grid(config.x_left, config.x_right, config.nx)
    initial = hat_function(
        grid,
        left=config.hat_left,
        right=config.hat_right,
        low=config.low,
        high=config.high,
    )
    stepper = ConvectionStepper(config.c, grid.dx, config.dt, backend=config.backend)
    num_steps = config.effective_steps

    logger.info(
        "Advancing %d steps on %d points (dx=%g, dt=%g, c=%g, courant=%g, backend=%s)",
        num_steps,
        grid.nx,
        grid.dx,
        config.dt,
        config.c,
        stepper.courant,
        config.backend,
    )
    if not is_upwind_stable(stepper.courant):
        logger.warning(
            "Courant number %g is outside [0, 1]; the upwind scheme is unstable for these parameters",
            stepper.courant,
        )

    history = None
    if store_history:
        history = _to_numpy(stepper.history(initial, num_steps))
        final = history[-1].copy()
    else:
        final = _to_numpy(stepper.advance(initial, num_steps))

    logger.debug("Final field range [%g, %g]", float(final.min()), float(final.max()))

    return SimulationResult(
        grid=grid,
        initial=initial,
        final=final,
        num_steps=num_steps,
        courant=stepper.courant,
        history=history,
    )

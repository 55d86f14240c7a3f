"""Step 1: 1D linear convection.

Advects a hat-shaped initial condition (u = 2 on 0.5 <= x <= 1, u = 1
elsewhere on [0, 2]) with the explicit upwind scheme

    u_i^{n+1} = u_i^n - c dt/dx (u_i^n - u_{i-1}^n)

and reports how far the hat has moved. Pass ``--plot`` to show the initial
condition and the solution with matplotlib.
"""

from __future__ import annotations

import logging
import sys

import numpy as np

import convection1d as cv
from convection1d.viz import plot_initial_and_solution


def main(show_plots: bool = False) -> None:
    """Run the textbook setup and print a summary."""
    cv.configure_logging(level=logging.INFO)

    config = cv.SimulationConfig(
        nx=81,
        x_left=0.0,
        x_right=2.0,
        num_steps=25,
        dt=0.025,
        c=1.0,
    )
    result = cv.run_simulation(config)

    plateau_before = np.flatnonzero(result.initial > config.low)
    plateau_after = np.flatnonzero(result.final > config.low + 0.5 * (config.high - config.low))

    print(f"Grid: {result.grid.nx} points, dx = {result.grid.dx:.4f}")
    print(f"Courant number: {result.courant:.3f}")
    print(f"Steps applied: {result.num_steps}")
    print(
        f"Hat before: x in [{result.grid.x[plateau_before[0]]:.3f}, "
        f"{result.grid.x[plateau_before[-1]]:.3f}]"
    )
    print(
        f"Hat after:  x in [{result.grid.x[plateau_after[0]]:.3f}, "
        f"{result.grid.x[plateau_after[-1]]:.3f}]"
    )
    print(f"Hat moved {plateau_after[0] - plateau_before[0]} cells")

    if show_plots:
        import matplotlib.pyplot as plt

        plot_initial_and_solution(result.grid, result.initial, result.final)
        plt.show()


if __name__ == "__main__":
    main(show_plots="--plot" in sys.argv[1:])

"""Benchmark the upwind stepper backends."""

import time
from typing import Dict

import convection1d as cv


def benchmark_stepper(
    nx: int,
    num_steps: int = 100,
    backend: str = "numpy",
) -> Dict[str, float]:
    """Benchmark advancing a hat initial condition.

    Args:
        nx: Number of grid points.
        num_steps: Number of timed time steps. Must be at least 1.
        backend: Stepper backend ('loop', 'numpy' or 'torch').

    Returns:
        Dictionary with timing results.

    Raises:
        ValueError: If num_steps is less than 1.
    """
    if num_steps < 1:
        raise ValueError(f"num_steps must be at least 1, got {num_steps}")

    grid = cv.uniform_grid(0.0, 2.0, nx)
    u0 = cv.hat_function(grid)
    stepper = cv.ConvectionStepper(c=1.0, dx=grid.dx, dt=0.5 * grid.dx, backend=backend)

    # Warmup
    stepper.advance(u0, 1)

    start = time.perf_counter()
    stepper.advance(u0, num_steps)
    end = time.perf_counter()

    total_time = end - start
    return {
        "nx": nx,
        "num_steps": num_steps,
        "total_time_sec": total_time,
        "time_per_step_sec": total_time / num_steps,
    }


if __name__ == "__main__":
    print("Benchmarking upwind stepper...")

    for backend in ("loop", "numpy", "torch"):
        results = benchmark_stepper(nx=10001, num_steps=100, backend=backend)
        print(f"{backend} backend (10001 points, 100 steps):")
        print(f"  Time per step: {results['time_per_step_sec']*1e3:.3f} ms")

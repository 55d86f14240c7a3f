"""Plotting helpers for convection fields (requires matplotlib)."""

from .plotting import plot_field, plot_initial_and_solution

__all__ = ["plot_field", "plot_initial_and_solution"]

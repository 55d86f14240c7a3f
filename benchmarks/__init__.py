"""Performance benchmarks for convection1d.

Compares the loop, vectorized NumPy and torch backends of the upwind stepper.
"""

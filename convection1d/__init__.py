"""convection1d - explicit upwind finite differences for 1D linear convection."""

__version__ = "0.1.0"

# Configuration and driver
from .config import SimulationConfig, load_config

# Device
from .core import Device, default_device, device

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Numerical core
from .pde import (
    Backend,
    ConvectionStepper,
    Grid,
    compute_cfl,
    constant_field,
    courant_number,
    hat_function,
    hat_index_bounds,
    is_stable_explicit,
    is_upwind_stable,
    linspace_grid,
    uniform_grid,
    upwind_step,
)
from .simulation import SimulationResult, run_simulation

__all__ = [
    # Version
    "__version__",
    # Numerical core
    "Backend",
    "ConvectionStepper",
    "courant_number",
    "upwind_step",
    "Grid",
    "uniform_grid",
    "linspace_grid",
    "constant_field",
    "hat_function",
    "hat_index_bounds",
    "compute_cfl",
    "is_stable_explicit",
    "is_upwind_stable",
    # Device
    "Device",
    "device",
    "default_device",
    # Configuration and driver
    "SimulationConfig",
    "load_config",
    "SimulationResult",
    "run_simulation",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]

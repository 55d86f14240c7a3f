"""Run configuration for the 1D linear convection lesson."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, Union

from .pde.stepper import BACKENDS, Backend
from .pde.utils import courant_number


@dataclass(frozen=True)
class SimulationConfig:
    """
    Parameters of a convection run.

    Defaults reproduce the textbook setup: 81 points on [0, 2], a hat of
    height 2 on [0.5, 1] over a background of 1, c = 1 and dt = 0.025
    (Courant number 1), advanced 25 steps.

    Args:
        nx: Number of grid points. Must be at least 2.
        x_left: Left end of the domain.
        x_right: Right end of the domain. Must exceed `x_left`.
        num_steps: Number of time steps to apply. Must be non-negative.
        dt: Time step.
        c: Wave speed.
        hat_left: Left edge of the hat plateau.
        hat_right: Right edge of the hat plateau.
        low: Background level of the initial condition.
        high: Plateau level of the initial condition.
        backend: Stepper backend, one of "loop", "numpy", "torch".
        legacy_extra_step: Apply one step more than `num_steps`, matching
            the lesson notebook, which loops ``num_steps + 1`` times.
    """

    nx: int = 81
    x_left: float = 0.0
    x_right: float = 2.0
    num_steps: int = 25
    dt: float = 0.025
    c: float = 1.0
    hat_left: float = 0.5
    hat_right: float = 1.0
    low: float = 1.0
    high: float = 2.0
    backend: Backend = "numpy"
    legacy_extra_step: bool = False

    def __post_init__(self) -> None:
        if int(self.nx) < 2:
            raise ValueError(f"nx must be at least 2, got {self.nx}")
        if self.x_right <= self.x_left:
            raise ValueError(
                f"x_right must exceed x_left, got [{self.x_left}, {self.x_right}]"
            )
        if int(self.num_steps) < 0:
            raise ValueError(f"num_steps must be non-negative, got {self.num_steps}")
        if self.hat_left > self.hat_right:
            raise ValueError(
                f"hat_left must not exceed hat_right, got {self.hat_left} > {self.hat_right}"
            )
        if self.backend not in BACKENDS:
            raise ValueError(
                f"Unsupported backend {self.backend!r}. Supported backends: {list(BACKENDS)}"
            )
        object.__setattr__(self, "nx", int(self.nx))
        object.__setattr__(self, "num_steps", int(self.num_steps))

    @property
    def dx(self) -> float:
        return (self.x_right - self.x_left) / (self.nx - 1)

    @property
    def courant(self) -> float:
        return courant_number(self.c, self.dx, self.dt)

    @property
    def effective_steps(self) -> int:
        """Number of updates actually applied, including the legacy extra step."""
        return self.num_steps + 1 if self.legacy_extra_step else self.num_steps

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        """
        Build a config from a mapping of field names to values.

        Raises:
            ValueError: If `data` contains keys that are not config fields.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown configuration keys: {unknown}")
        return cls(**dict(data))


def load_config(path: Union[str, Path]) -> SimulationConfig:
    """Read a :class:`SimulationConfig` from a JSON object stored at `path`."""
    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Configuration file must contain a JSON object, got {type(data).__name__}")
    return SimulationConfig.from_dict(data)

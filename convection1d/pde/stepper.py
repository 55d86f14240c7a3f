"""
First-order upwind time stepping for the 1D linear convection equation

    du/dt + c du/dx = 0

using forward differences in time and backward differences in space:

    u_i^{n+1} = u_i^n - c dt/dx (u_i^n - u_{i-1}^n),   i = 1..N-1

The left boundary value ``u_0`` is held fixed. Every step reads only from a
frozen copy of the previous time level.
"""

from __future__ import annotations

import operator
from typing import Literal, Optional, Union

import numpy as np
import torch

from ..core.device import Device, default_device
from .utils import courant_number

Backend = Literal["loop", "numpy", "torch"]
FieldLike = Union[np.ndarray, torch.Tensor]

BACKENDS = ("loop", "numpy", "torch")


def upwind_step(u_old: np.ndarray, courant: float) -> np.ndarray:
    """
    Apply one upwind update to a snapshot and return the new time level.

    `u_old` is only read. Index 0 is copied through unchanged. A non-finite
    Courant number propagates into the field without a warning.
    """
    u_new = u_old.copy()
    with np.errstate(invalid="ignore", over="ignore"):
        u_new[1:] = u_old[1:] - courant * (u_old[1:] - u_old[:-1])
    return u_new


class ConvectionStepper:
    """
    Explicit upwind stepper for 1D linear convection on a uniform grid.

    The stepper never validates stability: with ``|c| dt / dx > 1`` the
    solution grows without bound, and choosing stable parameters is left to
    the caller (see :func:`convection1d.pde.utils.compute_cfl`).

    Backends
    --------
    ``"loop"``
        Explicit inner loop over grid indices, one point at a time.
    ``"numpy"``
        The same stencil as a single vectorized slice update.
    ``"torch"``
        Vectorized update on a ``torch.Tensor`` living on `device`. Results
        are returned as tensors.

    All backends agree for the same floating-point precision.
    """

    def __init__(
        self,
        c: float,
        dx: float,
        dt: float,
        backend: Backend = "numpy",
        device: Optional[Device] = None,
    ) -> None:
        if backend not in BACKENDS:
            raise ValueError(
                f"Unsupported backend {backend!r}. Supported backends: {list(BACKENDS)}"
            )
        if device is not None and backend != "torch":
            raise ValueError("device is only used by the 'torch' backend.")

        self.c = float(c)
        self.dx = float(dx)
        self.dt = float(dt)
        self.backend = backend
        self.device = device if device is not None else default_device()
        self._courant = courant_number(self.c, self.dx, self.dt)

    def __repr__(self) -> str:
        return (
            f"ConvectionStepper(c={self.c}, dx={self.dx}, dt={self.dt}, "
            f"backend={self.backend!r})"
        )

    @property
    def courant(self) -> float:
        """Signed Courant number c dt / dx."""
        return self._courant

    # ------------------------------------------------------------------
    def step(self, u: FieldLike) -> FieldLike:
        """Return the field one time step after `u`."""
        return self.advance(u, 1)

    def advance(self, u: FieldLike, num_steps: int) -> FieldLike:
        """
        Return the field after `num_steps` upwind updates.

        The stepper works on its own copy of `u`; the caller's array is
        never modified. With ``num_steps == 0`` or fewer than two grid points
        the result equals the input.

        Raises
        ------
        ValueError
            If `u` is not one-dimensional or `num_steps` is negative.
        TypeError
            If `num_steps` is not an integer.
        """
        num_steps = self._check_num_steps(num_steps)
        field = self._own(u)
        for _ in range(num_steps):
            field = self._advance_once(field)
        return field

    def history(self, u: FieldLike, num_steps: int) -> FieldLike:
        """Return all time levels as an array of shape (num_steps + 1, nx)."""
        num_steps = self._check_num_steps(num_steps)
        field = self._own(u)

        if self.backend == "torch":
            levels = torch.empty(
                (num_steps + 1, field.shape[0]),
                dtype=field.dtype,
                device=field.device,
            )
        else:
            levels = np.empty((num_steps + 1, field.shape[0]), dtype=float)

        levels[0] = field
        for step in range(1, num_steps + 1):
            field = self._advance_once(field)
            levels[step] = field
        return levels

    # ------------------------------------------------------------------
    @staticmethod
    def _check_num_steps(num_steps: int) -> int:
        num_steps = operator.index(num_steps)
        if num_steps < 0:
            raise ValueError(f"num_steps must be non-negative, got {num_steps}.")
        return num_steps

    def _own(self, u: FieldLike) -> FieldLike:
        if self.backend == "torch":
            if isinstance(u, torch.Tensor):
                field = u.detach().to(
                    device=self.device.as_torch_device(), dtype=self.device.dtype
                ).clone()
            else:
                field = torch.tensor(
                    np.asarray(u, dtype=float),
                    dtype=self.device.dtype,
                    device=self.device.as_torch_device(),
                )
        else:
            if isinstance(u, torch.Tensor):
                u = u.detach().cpu().numpy()
            field = np.array(u, dtype=float)

        if field.ndim != 1:
            raise ValueError(f"field must be one-dimensional, got shape {tuple(field.shape)}.")
        return field

    def _advance_once(self, field: FieldLike) -> FieldLike:
        if field.shape[0] < 2:
            return field
        if self.backend == "loop":
            return self._advance_loop(field)
        if self.backend == "torch":
            return self._advance_torch(field)
        return upwind_step(field, self._courant)

    def _advance_loop(self, u: np.ndarray) -> np.ndarray:
        u_old = u.copy()
        with np.errstate(invalid="ignore", over="ignore"):
            for i in range(1, u.shape[0]):
                u[i] = u_old[i] - self._courant * (u_old[i] - u_old[i - 1])
        return u

    def _advance_torch(self, u: torch.Tensor) -> torch.Tensor:
        u_old = u.clone()
        u[1:] = u_old[1:] - self._courant * (u_old[1:] - u_old[:-1])
        return u

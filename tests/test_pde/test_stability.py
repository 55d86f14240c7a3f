from __future__ import annotations

import numpy as np
import pytest

from convection1d.pde.stepper import ConvectionStepper
from convection1d.pde.utils import (
    compute_cfl,
    courant_number,
    is_stable_explicit,
    is_upwind_stable,
    linspace_grid,
)


def test_compute_cfl_and_stability_helpers() -> None:
    cfl = compute_cfl(dx=0.1, dt=0.02, wave_speed=2.0)
    assert cfl == pytest.approx(0.4)
    assert is_stable_explicit(cfl)
    assert is_stable_explicit(1.0)
    assert not is_stable_explicit(1.1)


def test_compute_cfl_uses_speed_magnitude() -> None:
    assert compute_cfl(dx=0.5, dt=0.1, wave_speed=-2.0) == pytest.approx(0.4)


def test_compute_cfl_matches_stepper_courant_number() -> None:
    stepper = ConvectionStepper(c=1.0, dx=0.025, dt=0.025)
    assert compute_cfl(dx=stepper.dx, dt=stepper.dt, wave_speed=stepper.c) == stepper.courant


def test_utils_validation_helpers() -> None:
    with pytest.raises(ValueError):
        compute_cfl(dx=0.0, dt=0.1, wave_speed=1.0)
    with pytest.raises(ValueError):
        compute_cfl(dx=0.1, dt=-0.1, wave_speed=1.0)
    with pytest.raises(ValueError):
        linspace_grid(0.0, 1.0, 1)


def test_linspace_grid_endpoints() -> None:
    x = linspace_grid(0.0, 2.0, 81)
    assert x.shape == (81,)
    assert x[0] == 0.0
    assert x[-1] == 2.0
    np.testing.assert_allclose(np.diff(x), 0.025)


def test_compute_cfl_is_magnitude_of_signed_courant_number() -> None:
    for c in (-1.5, -0.3, 0.0, 0.7, 2.0):
        assert compute_cfl(dx=0.05, dt=0.02, wave_speed=c) == abs(courant_number(c, 0.05, 0.02))


def test_upwind_stability_requires_courant_in_unit_interval() -> None:
    assert is_upwind_stable(0.0)
    assert is_upwind_stable(0.5)
    assert is_upwind_stable(1.0)
    assert not is_upwind_stable(1.01)
    assert not is_upwind_stable(-0.2)
    assert not is_upwind_stable(courant_number(0.0, 0.0, 0.1))
    assert not is_upwind_stable(courant_number(1.0, 0.0, 0.1))

"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from srjet.core.mesh import build_block
from srjet.core.params import derive_invariants, from_config


def _rotating_problem(**overrides):
    """Rotating, magnetized jet in a static ambient medium."""
    problem = {
        "d": 1.0, "p": 0.01, "vx": 0.0, "vy": 0.0, "vz": 0.0,
        "bx": 0.0, "by": 0.0, "bz": 0.0,
        "djet": 0.1, "pjet": 0.01, "vxjet": 0.2, "vyjet": 0.5, "vzjet": 5.0,
        "bxjet": 0.0, "byjet": 0.0, "bzjet": 0.0,
        "b0": 0.3, "z0": 1.0,
        "rjet": 1.0, "drjet": 0.1,
        "mang": 4.0, "dang": 0.0,
    }
    problem.update(overrides)
    return problem


@pytest.fixture
def make_params():
    """Factory: (pp, inv) for the rotating jet with problem-key overrides."""
    def _make(x1min=0.1, x1rat=1.0, gamma=4.0/3.0, magnetic=True, **overrides):
        pp = from_config(_rotating_problem(**overrides), gamma, x1min, x1rat, magnetic)
        return pp, derive_invariants(pp)
    return _make


@pytest.fixture
def rotating(make_params):
    return make_params()


@pytest.fixture
def small_block():
    """6 radial x 1 azimuthal x 4 axial cells spanning the jet edge."""
    return build_block(nr=6, nphi=1, nz=4, r_min=0.1, r_max=1.6,
                       z_min=0.0, z_max=0.5, ng=2)


@pytest.fixture
def rotating_problem():
    """Factory for the rotating-jet problem block with overrides."""
    return _rotating_problem

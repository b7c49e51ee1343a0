#!/usr/bin/env python3
# srjet/core/eos.py
# Gamma-law helpers for the jet/ambient invariants.
import numpy as np
import numba as nb

SMALL = 1e-12


@nb.njit(fastmath=True)
def gamma_add(gamma):
    return gamma / (gamma - 1.0)


@nb.njit(fastmath=True)
def enthalpy(rho, p, gamma):
    # specific enthalpy h = 1 + gamma/(gamma-1) p/rho
    return 1.0 + gamma_add(gamma) * p / max(rho, SMALL)


@nb.njit(fastmath=True)
def enthalpy_density(rho, p, gamma):
    return rho * enthalpy(rho, p, gamma)


@nb.njit(fastmath=True)
def lorentz_from_four_velocity(ux, uy, uz):
    return np.sqrt(1.0 + ux*ux + uy*uy + uz*uz)

#!/usr/bin/env python3
# srjet/core/adaptivity.py
# Magnetization-based refinement flag for a block.
import numba as nb

from srjet.core.mesh import IDN

REFINE = 1
NO_ACTION = 0
DEREFINE = -1   # kept for the framework's flag set; never returned

SIGMA_REFINE = 0.01
SMALL = 1e-12


@nb.njit(fastmath=True)
def _max_sigma(rho, b1, b2, b3, i0, i1, j0, j1, k0, k1):
    maxsig = 0.0
    for i in range(i0, i1 + 1):
        for j in range(j0, j1 + 1):
            for k in range(k0, k1 + 1):
                bsq = b1[i, j, k]*b1[i, j, k] + b2[i, j, k]*b2[i, j, k] + b3[i, j, k]*b3[i, j, k]
                sig = bsq / max(rho[i, j, k], SMALL)
                if sig > maxsig:
                    maxsig = sig
    return maxsig


def max_magnetization(prim, bcc, geom):
    """Largest sigma = |B|^2 / rho over the interior cells."""
    return _max_sigma(prim[IDN], bcc[0], bcc[1], bcc[2],
                      geom.is_, geom.ie, geom.js, geom.je, geom.ks, geom.ke)


def flag_for(sigma, threshold=SIGMA_REFINE):
    # no de-refinement: DEREFINE is never returned
    return REFINE if sigma > threshold else NO_ACTION


def refinement_flag(prim, bcc, geom, threshold=SIGMA_REFINE):
    return flag_for(max_magnetization(prim, bcc, geom), threshold)

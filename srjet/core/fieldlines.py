#!/usr/bin/env python3
# srjet/core/fieldlines.py
# Helical field-line geometry: (r, z) -> radius of the line at the inner edge.
import math

from srjet.core.profiles import blend, jet_weight
from srjet.core.roots import RootSolveError, solve_monotonic_root
from srjet.utils.counters import bump


def rotation_rate(r0, pp, inv):
    """Radial/axial velocity ratio of the line that starts at r0 (opening)."""
    w = jet_weight(r0, pp.r_jet, pp.dr_jet)
    return blend(inv.rang_jet, inv.rang_amb, w) * (r0 - pp.x1min) / pp.r_jet


def twist_rate(r0, pp, inv):
    """Azimuthal/axial velocity ratio of the line that starts at r0 (rotation)."""
    w = jet_weight(r0, pp.r_jet, pp.dr_jet)
    return blend(inv.phang_jet, inv.phang_amb, w) * (r0 - pp.x1min) / pp.r_jet


def mapped_radius(r0, z, pp, inv):
    # forward map: where the line starting at r0 sits at height z
    return r0 + rotation_rate(r0, pp, inv) * pp.z0 * (1.0 - math.exp(-z / pp.z0))


def source_radius(r, z, pp, inv, diag=None):
    """
    Inverse of mapped_radius in r0.
    r <= x1min maps to x1min; beyond the transition band the lines are
    untwisted and the map is the identity.
    """
    if r <= pp.x1min:
        return pp.x1min
    r_out = pp.r_jet + pp.dr_jet
    if r >= r_out:
        return r

    def resid(r0):
        return mapped_radius(r0, z, pp, inv) - r

    try:
        return solve_monotonic_root(resid, (pp.x1min, r_out))
    except RootSolveError as err:
        bump(diag, "root_" + err.reason)
        return err.best

#!/usr/bin/env python3
# srjet/core/flux.py
# Closed-form enclosed flux (r A_phi) of the jet field and the vector potential.
#
# dF/dr0 = B0 a^2 r0 S(r0) / (a^2 + r0^2), S the jet weight, so
#   r0 <  rj - drj : logarithmic core profile
#   |r0 - rj| < drj: polynomial + atan + log transition band
#   r0 >= rj + drj : constant (no field outside the jet)
import math

from srjet.core.fieldlines import source_radius
from srjet.utils.counters import bump

MIN_RADIUS = 1e-12


def flux_core(x, pp, inv):
    a2 = inv.a * inv.a
    return pp.b0 * (a2 / 2.0) * math.log(a2 + x*x)


def flux_band(x, pp, inv):
    a = inv.a
    a2 = a * a
    rj = pp.r_jet
    dr = pp.dr_jet
    poly = x * (-6.0*a2 - 18.0*dr*dr + 18.0*rj*rj - 9.0*rj*x + 2.0*x*x)
    arc = 6.0 * a * (a2 + 3.0*dr*dr - 3.0*rj*rj) * math.atan(x / a)
    lg = (9.0*rj*a2 + 6.0*dr**3 + 9.0*rj*dr*dr - 3.0*rj**3) * math.log(a2 + x*x)
    return pp.b0 * (inv.d * a2 / 6.0) * (poly + arc + lg)


def flux(r0, pp, inv):
    """Enclosed flux at source radius r0, zero at the inner edge."""
    r_in = pp.r_jet - pp.dr_jet
    r_out = pp.r_jet + pp.dr_jet
    base = flux_core(pp.x1min, pp, inv)
    if r0 < r_in:
        return flux_core(r0, pp, inv) - base
    at_band = flux_core(r_in, pp, inv) - base - flux_band(r_in, pp, inv)
    if r0 < r_out:
        return flux_band(r0, pp, inv) + at_band
    return flux_band(r_out, pp, inv) + at_band


def enclosed_flux(r, z, pp, inv, diag=None):
    # r * A_phi(r, z): flux carried by the field line through (r, z)
    return flux(source_radius(r, z, pp, inv, diag), pp, inv)


def potential(r, z, pp, inv, diag=None):
    """A_phi(r, z) = F(r0(r, z)) / r."""
    if r < MIN_RADIUS:
        f = enclosed_flux(max(r, 0.0), z, pp, inv, diag)
        if f == 0.0:
            # on the axis: no enclosed flux, A_phi vanishes
            return 0.0
        bump(diag, "radius")
        return f / MIN_RADIUS
    return enclosed_flux(r, z, pp, inv, diag) / r

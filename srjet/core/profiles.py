#!/usr/bin/env python3
# srjet/core/profiles.py
# Radial blending helpers shared by the flux function and the inflow state.


def smooth_step(x):
    """
    Clamped cubic step: 1 for x <= -1, 0 for x >= 1, zero slope at both ends.
    """
    modx = max(min(x, 1.0), -1.0)
    return 0.5 - modx * (3.0 - modx*modx) / 4.0


def jet_weight(r, r_jet, dr_jet):
    # 1 inside the jet core, 0 in the ambient medium
    return smooth_step((r - r_jet) / dr_jet)


def blend(jet_value, amb_value, w):
    return (jet_value - amb_value) * w + amb_value


def bphi_profile(r, b0, a):
    # force-free-like azimuthal field B0 a r / (a^2 + r^2)
    return b0 * a * r / (a*a + r*r)

#!/usr/bin/env python3
# srjet/core/inflow.py
# Primitive state of the rotating, magnetized jet on the lower-z inflow face.
import math

from srjet.core.fieldlines import rotation_rate, source_radius, twist_rate
from srjet.core.mesh import IDN, IPR, IVX, IVY, IVZ
from srjet.core.profiles import blend, jet_weight
from srjet.utils.counters import bump

# tolerated undershoot of Gamma below 1 from rounding
GAMMA_UNDERSHOOT = 1e-10


def lorentz_factor(psi, atw, k, p, diag=None):
    """
    Positive root of k p G^2 + Psi G - atw = 0, i.e.
        G = Psi/(2 k p) (sqrt(1 + 4 k p atw / Psi^2) - 1),
    evaluated as 2 atw / (Psi (1 + sqrt(...))) to avoid cancellation.
    A negative radicand or a non-physical result is clamped to G = 1.
    """
    if psi == 0.0:
        bump(diag, "lorentz")
        return 1.0
    arg = 1.0 + 4.0 * k * p * atw / (psi * psi)
    if not (arg >= 0.0 and math.isfinite(arg)):
        bump(diag, "lorentz")
        return 1.0
    g = 2.0 * atw / (psi * (1.0 + math.sqrt(arg)))
    if not math.isfinite(g) or g < 1.0 - GAMMA_UNDERSHOOT:
        bump(diag, "lorentz")
        return 1.0
    return max(g, 1.0)


def inflow_state(r0, z, phi, pp, inv, diag=None):
    """
    (rho, vr, vphi, vz, p) for a sample whose field line starts at r0.
    Velocities are spatial four-velocity components.

    The azimuthal ripple dang*cos(mang*phi) moves the jet edge seen by the
    Bernoulli invariant, so only the density is perturbed; the velocities use
    the unperturbed radius and stay axisymmetric.
    """
    k = pp.gam_add
    p = pp.p_amb
    rad = r0 * (1.0 + pp.dang * math.cos(pp.mang * phi))
    w = jet_weight(r0, pp.r_jet, pp.dr_jet)
    w_pert = jet_weight(rad, pp.r_jet, pp.dr_jet)

    atw = blend(inv.atw_jet_eq, inv.atw_amb, w)
    bern = blend(inv.bern_jet, inv.bern_amb, w_pert)
    bern_np = blend(inv.bern_jet, inv.bern_amb, w)
    bphi = inv.bphi_core * w

    psi = (atw + bphi*bphi) / bern
    psi_np = (atw + bphi*bphi) / bern_np
    gam = lorentz_factor(psi, atw, k, p, diag)
    gam_np = lorentz_factor(psi_np, atw, k, p, diag)

    rang = rotation_rate(r0, pp, inv)
    phang = twist_rate(r0, pp, inv)
    decay = math.exp(-z / pp.z0)
    vz = math.sqrt((gam_np*gam_np - 1.0) / (1.0 + rang*rang*decay*decay + phang*phang))
    vr = vz * rang * decay
    vphi = vz * phang
    rho = psi / gam
    return rho, vr, vphi, vz, p


def sample_state(r, z, phi, pp, inv, diag=None):
    return inflow_state(source_radius(r, z, pp, inv, diag), z, phi, pp, inv, diag)


def fill_inflow_prims(prim, geom, pp, inv, diag=None):
    """
    Fill the lower-z ghost layers of prim[var, i, j, k].
    The source radius depends on (r, z) only and is reused across phi.
    """
    ks, ng = geom.ks, geom.ng
    for g in range(1, ng + 1):
        k = ks - g
        z = geom.x3v[k]
        for i in range(prim.shape[1]):
            r0 = source_radius(geom.x1v[i], z, pp, inv, diag)
            for j in range(prim.shape[2]):
                rho, vr, vphi, vz, p = inflow_state(r0, z, geom.x2v[j], pp, inv, diag)
                prim[IDN, i, j, k] = rho
                prim[IVX, i, j, k] = vr
                prim[IVY, i, j, k] = vphi
                prim[IVZ, i, j, k] = vz
                prim[IPR, i, j, k] = p

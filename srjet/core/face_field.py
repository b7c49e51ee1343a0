#!/usr/bin/env python3
# srjet/core/face_field.py
# Face-centred field from the discrete curl of A_phi (cylindrical r, phi, z).
#
#   b1(r_f, z-cell)  = (A(r_f, z_k) - A(r_f, z_k+1)) / dz
#   b3(r-cell, z_f)  = 2 (r_i+1 A(r_i+1) - r_i A(r_i)) / (r_i+1^2 - r_i^2)
#
# Both come from the same A values, so the flux through every cell closes
# to round-off.
from collections import namedtuple

import numpy as np

from srjet.core.flux import enclosed_flux, potential
from srjet.core.mesh import IVX, IVZ

FaceField = namedtuple("FaceField", ["b1", "b2", "b3"])

SMALL = 1e-12


def alloc_face_field(geom):
    n1, n2, n3 = geom.shape
    return FaceField(
        b1=np.zeros((n1 + 1, n2, n3)),
        b2=np.zeros((n1, n2 + 1, n3)),
        b3=np.zeros((n1, n2, n3 + 1)),
    )


def radial_face(rf, zf, zf_p1, pp, inv, diag=None):
    dz = zf_p1 - zf
    if rf < pp.x1min:
        # reflect through the inner edge, flip orientation
        mr = 2.0*pp.x1min - rf
        return -(potential(mr, zf, pp, inv, diag) - potential(mr, zf_p1, pp, inv, diag)) / dz
    return (potential(rf, zf, pp, inv, diag) - potential(rf, zf_p1, pp, inv, diag)) / dz


def axial_face(rf, rf_p1, zf, pp, inv, diag=None):
    if rf < pp.x1min:
        # mirror cell across the inner edge: its lower face reflects rf_p1
        mr = 2.0*pp.x1min - rf_p1
        if pp.x1rat > 1.0:
            mr_p1 = pp.x1rat * mr
        else:
            mr_p1 = mr + rf_p1 - rf
        rf, rf_p1 = mr, mr_p1
    return 2.0 * (enclosed_flux(rf_p1, zf, pp, inv, diag)
                  - enclosed_flux(rf, zf, pp, inv, diag)) / (rf_p1*rf_p1 - rf*rf)


def fill_inflow_face_fields(b, geom, pp, inv, diag=None):
    """
    Face fields on the lower-z ghost layers (the face at ks is left alone).
    b2 is zero there: the azimuthal field enters only through the Bphi term of
    the inflow state.
    """
    ks, ng = geom.ks, geom.ng
    x1f, x3f = geom.x1f, geom.x3f
    n1 = len(geom.x1v)
    for g in range(1, ng + 1):
        k = ks - g
        zf, zf_p1 = x3f[k], x3f[k+1]
        for i in range(n1 + 1):
            b.b1[i, :, k] = radial_face(x1f[i], zf, zf_p1, pp, inv, diag)
        b.b2[:, :, k] = 0.0
        for i in range(n1):
            b.b3[i, :, k] = axial_face(x1f[i], x1f[i+1], zf, pp, inv, diag)


def init_face_fields(b, geom, pp, inv, diag=None):
    """Initial face fields on the whole block, ghosts included, no mirroring."""
    x1f, x3f = geom.x1f, geom.x3f
    n1, _, n3 = geom.shape
    for k in range(n3):
        for i in range(n1 + 1):
            b.b1[i, :, k] = (potential(x1f[i], x3f[k], pp, inv, diag)
                             - potential(x1f[i], x3f[k+1], pp, inv, diag)) / (x3f[k+1] - x3f[k])
    b.b2[...] = pp.by_amb
    for k in range(n3 + 1):
        for i in range(n1):
            rf, rf_p1 = x1f[i], x1f[i+1]
            b.b3[i, :, k] = 2.0 * (enclosed_flux(rf_p1, x3f[k], pp, inv, diag)
                                   - enclosed_flux(rf, x3f[k], pp, inv, diag)) / (rf_p1*rf_p1 - rf*rf)


def cell_centered_field(b):
    bcc = np.empty((3,) + b.b2[:, :-1, :].shape)
    bcc[0] = 0.5 * (b.b1[:-1] + b.b1[1:])
    bcc[1] = 0.5 * (b.b2[:, :-1] + b.b2[:, 1:])
    bcc[2] = 0.5 * (b.b3[:, :, :-1] + b.b3[:, :, 1:])
    return bcc


def align_core_velocity(prim, bcc, geom, pp):
    """
    Inside r <= r_jet + dr_jet make the poloidal velocity parallel to the field:
    vr = vz * Br / Bz on the lower-z ghost layers.
    """
    ks, ng = geom.ks, geom.ng
    r_out = pp.r_jet + pp.dr_jet
    for g in range(1, ng + 1):
        k = ks - g
        for i in range(prim.shape[1]):
            if geom.x1v[i] > r_out:
                continue
            bz = bcc[2, i, :, k]
            ok = np.abs(bz) > SMALL
            prim[IVX, i, ok, k] = prim[IVZ, i, ok, k] * bcc[0, i, ok, k] / bz[ok]


def divergence(b, geom):
    """Discrete div B per cell (net outward flux / volume)."""
    r = geom.x1f
    dphi = np.diff(geom.x2f)
    dz = np.diff(geom.x3f)
    rl = r[:-1, None, None]
    rr = r[1:, None, None]
    vol_r = 0.5 * (rr*rr - rl*rl)
    flux_r = (rr * b.b1[1:] - rl * b.b1[:-1]) * dphi[None, :, None] * dz[None, None, :]
    flux_phi = (b.b2[:, 1:] - b.b2[:, :-1]) * (rr - rl) * dz[None, None, :]
    flux_z = (b.b3[:, :, 1:] - b.b3[:, :, :-1]) * vol_r * dphi[None, :, None]
    vol = vol_r * dphi[None, :, None] * dz[None, None, :]
    return (flux_r + flux_phi + flux_z) / vol

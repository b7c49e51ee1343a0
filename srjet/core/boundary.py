#!/usr/bin/env python3
# srjet/core/boundary.py
# Jet inflow on the lower-z face and the initial ambient block.
from srjet.core.face_field import (align_core_velocity, alloc_face_field,
                                   cell_centered_field, fill_inflow_face_fields,
                                   init_face_fields)
from srjet.core.inflow import fill_inflow_prims
from srjet.core.mesh import IDN, IPR, IVX, IVY, IVZ, alloc_prims
from srjet.core.params import derive_invariants
from srjet.utils.counters import ClampCounters


class JetInflowBoundary:
    """
    Boundary function for the inner-z face. Holds the physical parameters, the
    invariants derived from them once, and the clamp counters; every call
    refills the ghost layers from scratch.
    """

    def __init__(self, pp, verbose=False):
        self.pp = pp
        self.inv = derive_invariants(pp)
        self.diag = ClampCounters()
        self.verbose = verbose
        self._reported = 0

    def __call__(self, prim, b, geom, time=0.0, dt=0.0):
        # the inflow is stationary: time and dt are not used
        fill_inflow_prims(prim, geom, self.pp, self.inv, self.diag)
        if self.pp.magnetic and b is not None:
            fill_inflow_face_fields(b, geom, self.pp, self.inv, self.diag)
            bcc = cell_centered_field(b)
            align_core_velocity(prim, bcc, geom, self.pp)
        if self.verbose and self.diag.total() > self._reported:
            self._reported = self.diag.total()
            print(f"[jet-bc] clamped cells so far: {self.diag.as_dict()}", flush=True)
        return None


def init_block(geom, pp, inv, diag=None):
    """Ambient medium everywhere, face fields from the jet potential."""
    prim = alloc_prims(geom)
    prim[IDN] = pp.d_amb
    prim[IVX] = pp.vx_amb
    prim[IVY] = pp.vy_amb
    prim[IVZ] = pp.vz_amb
    prim[IPR] = pp.p_amb
    b = None
    if pp.magnetic:
        b = alloc_face_field(geom)
        init_face_fields(b, geom, pp, inv, diag)
    return prim, b


def prepare_block(geom, bc, time=0.0):
    """Problem generator followed by one boundary refresh. Only the refresh counts into bc.diag."""
    prim, b = init_block(geom, bc.pp, bc.inv)
    bc(prim, b, geom, time=time)
    return prim, b

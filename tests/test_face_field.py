"""Tests for the face-centred field construction."""

from __future__ import annotations

import numpy as np
import pytest

from srjet.core.boundary import JetInflowBoundary, init_block
from srjet.core.face_field import (alloc_face_field, axial_face, cell_centered_field,
                                   divergence, fill_inflow_face_fields, radial_face)
from srjet.core.mesh import IVX, IVZ, build_block


def refreshed_block(pp, inv, geom):
    prim, b = init_block(geom, pp, inv)
    JetInflowBoundary(pp)(prim, b, geom)
    return prim, b


class TestDivergence:

    def test_solenoidal_to_round_off(self, rotating, small_block):
        pp, inv = rotating
        geom = small_block
        _, b = refreshed_block(pp, inv, geom)
        divb = divergence(b, geom)[geom.is_:]
        bmax = max(np.abs(b.b1).max(), np.abs(b.b3).max())
        dr = np.diff(geom.x1f).min()
        assert bmax > 0.0
        assert np.abs(divb).max() <= 1e-10 * bmax / dr

    def test_solenoidal_on_stretched_grid(self, make_params):
        pp, inv = make_params(x1min=0.2, x1rat=1.1)
        geom = build_block(nr=8, nphi=3, nz=3, r_min=0.2, r_max=1.8,
                           z_min=0.0, z_max=0.6, ng=2, r_rat=1.1)
        _, b = refreshed_block(pp, inv, geom)
        divb = divergence(b, geom)[geom.is_:]
        bmax = max(np.abs(b.b1).max(), np.abs(b.b3).max())
        dr = np.diff(geom.x1f).min()
        assert np.abs(divb).max() <= 1e-10 * bmax / dr

    def test_ghost_layers_carry_twisted_field(self, rotating, small_block):
        pp, inv = rotating
        geom = small_block
        _, b = refreshed_block(pp, inv, geom)
        ghost_br = b.b1[geom.is_:geom.ie + 1, :, :geom.ks]
        assert np.abs(ghost_br).max() > 0.0


class TestFaceValues:

    def test_azimuthal_face_zero_on_inflow(self, make_params, small_block):
        pp, inv = make_params(by=0.2)
        geom = small_block
        _, b = refreshed_block(pp, inv, geom)
        assert np.all(b.b2[:, :, :geom.ks] == 0.0)
        assert np.all(b.b2[:, :, geom.ks:] == 0.2)

    def test_radial_mirror(self, rotating):
        pp, inv = rotating
        zf, zf1 = -0.25, -0.125
        inner = radial_face(pp.x1min - 0.05, zf, zf1, pp, inv)
        outer = radial_face(pp.x1min + 0.05, zf, zf1, pp, inv)
        assert outer != 0.0
        assert inner == pytest.approx(-outer, rel=1e-12)

    def test_axial_mirror_additive(self, rotating):
        pp, inv = rotating
        got = axial_face(0.05, 0.1, -0.1, pp, inv)
        ref = axial_face(0.1, 0.15, -0.1, pp, inv)
        assert got == pytest.approx(ref, rel=1e-12)

    def test_axial_mirror_geometric(self, make_params):
        pp, inv = make_params(x1rat=1.1)
        got = axial_face(0.05, 0.07, -0.1, pp, inv)
        ref = axial_face(0.13, 0.143, -0.1, pp, inv)
        assert got == pytest.approx(ref, rel=1e-12)

    def test_ghost_cells_mirror_interior_cells(self, make_params):
        pp, inv = make_params(x1min=0.5)
        geom = build_block(nr=6, nphi=1, nz=4, r_min=0.5, r_max=1.7,
                           z_min=0.0, z_max=0.5, ng=2)
        b = alloc_face_field(geom)
        fill_inflow_face_fields(b, geom, pp, inv)
        is_ = geom.is_
        for k in range(geom.ks):
            assert b.b3[is_ - 1, 0, k] == pytest.approx(b.b3[is_, 0, k], rel=1e-12)
            assert b.b3[is_ - 2, 0, k] == pytest.approx(b.b3[is_ + 1, 0, k], rel=1e-12)
            assert b.b3[is_, 0, k] != pytest.approx(b.b3[is_ + 1, 0, k], rel=1e-6)

    def test_interface_face_untouched(self, rotating, small_block):
        pp, inv = rotating
        geom = small_block
        b = alloc_face_field(geom)
        b.b3[...] = 7.0
        fill_inflow_face_fields(b, geom, pp, inv)
        assert np.all(b.b3[:, :, geom.ks:] == 7.0)


class TestCellCentred:

    def test_averages_faces(self, small_block):
        geom = small_block
        b = alloc_face_field(geom)
        b.b1[...] = np.arange(b.b1.shape[0])[:, None, None]
        b.b3[...] = 2.0
        bcc = cell_centered_field(b)
        assert bcc.shape == (3,) + geom.shape
        np.testing.assert_allclose(bcc[0, :, 0, 0], np.arange(geom.shape[0]) + 0.5)
        assert np.all(bcc[2] == 2.0)

    def test_core_velocity_follows_field(self, rotating, small_block):
        pp, inv = rotating
        geom = small_block
        prim, b = refreshed_block(pp, inv, geom)
        bcc = cell_centered_field(b)
        r_out = pp.r_jet + pp.dr_jet
        checked = 0
        for k in range(geom.ks):
            for i in range(geom.shape[0]):
                if geom.x1v[i] <= r_out and abs(bcc[2, i, 0, k]) > 1e-12:
                    expect = prim[IVZ, i, 0, k] * bcc[0, i, 0, k] / bcc[2, i, 0, k]
                    assert prim[IVX, i, 0, k] == pytest.approx(expect, rel=1e-12)
                    checked += 1
        assert checked > 0

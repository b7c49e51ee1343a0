"""Tests for the cylindrical block geometry."""

from __future__ import annotations

import numpy as np
import pytest

from srjet.core.mesh import build_block, make_faces, slice_block, split_extent


class TestMakeFaces:

    def test_uniform(self):
        xf = make_faces(0.0, 2.0, 4, 2)
        np.testing.assert_allclose(xf, np.linspace(-1.0, 3.0, 9))

    def test_stretched(self):
        xf = make_faces(0.5, 3.0, 6, 2, ratio=1.2)
        assert xf[2] == 0.5 and xf[8] == 3.0
        w = np.diff(xf[2:9])
        np.testing.assert_allclose(w[1:] / w[:-1], 1.2)

    def test_ghosts_mirror_interior_widths(self):
        xf = make_faces(0.5, 3.0, 6, 2, ratio=1.2)
        w = np.diff(xf)
        assert w[1] == pytest.approx(w[2])
        assert w[0] == pytest.approx(w[3])
        assert w[-2] == pytest.approx(w[-3])

    def test_rejects_bad_input(self):
        with pytest.raises(ValueError):
            make_faces(0.0, 1.0, 0, 2)
        with pytest.raises(ValueError):
            make_faces(0.0, 1.0, 4, 2, ratio=0.0)


class TestBlocks:

    def test_axisymmetric_block(self):
        geom = build_block(nr=5, nphi=1, nz=3, r_min=0.0, r_max=1.0,
                           z_min=0.0, z_max=1.0, ng=2)
        assert geom.ng2 == 0
        assert geom.shape == (9, 1, 7)
        assert (geom.is_, geom.ie, geom.js, geom.je, geom.ks, geom.ke) == (2, 6, 0, 0, 2, 4)
        assert geom.x3v[geom.ks - 1] < 0.0

    def test_split_extent(self):
        counts = [split_extent(10, 3, r)[0] for r in range(3)]
        offsets = [split_extent(10, 3, r)[1] for r in range(3)]
        assert counts == [4, 3, 3]
        assert offsets == [0, 4, 7]

    def test_slice_matches_global(self):
        glob = build_block(nr=10, nphi=1, nz=2, r_min=0.0, r_max=1.0,
                           z_min=0.0, z_max=1.0, ng=2, r_rat=1.05)
        loc = slice_block(glob, 4, 3)
        assert loc.shape == (7, 1, 6)
        np.testing.assert_array_equal(loc.x1f, glob.x1f[4:12])
        assert loc.x1f[loc.is_] == glob.x1f[glob.is_ + 4]

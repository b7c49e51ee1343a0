#!/usr/bin/env python3
# srjet/core/mesh.py
# Cylindrical (r, phi, z) block geometry with ghost zones.
import math
from dataclasses import dataclass

import numpy as np

NHYDRO = 5
IDN, IVX, IVY, IVZ, IPR = 0, 1, 2, 3, 4


def make_faces(xmin, xmax, n, ng, ratio=1.0):
    """
    Face coordinates of n cells on [xmin, xmax] plus ng ghost cells per side.
    ratio != 1 gives geometric stretching dx_{i+1} = ratio * dx_i; ghost widths
    mirror the adjacent interior widths.
    """
    if n < 1:
        raise ValueError("need at least one cell")
    if ratio <= 0.0:
        raise ValueError("stretch ratio must be > 0")
    if ratio == 1.0:
        widths = np.full(n, (xmax - xmin) / n)
    else:
        dx0 = (xmax - xmin) * (ratio - 1.0) / (ratio**n - 1.0)
        widths = dx0 * ratio ** np.arange(n)
    xf = np.empty(n + 2*ng + 1)
    xf[ng] = xmin
    xf[ng+1:ng+n+1] = xmin + np.cumsum(widths)
    xf[ng+n] = xmax
    for g in range(1, ng + 1):
        xf[ng - g] = xf[ng - g + 1] - widths[min(g - 1, n - 1)]
        xf[ng + n + g] = xf[ng + n + g - 1] + widths[max(n - g, 0)]
    return xf


def centers(xf):
    return 0.5 * (xf[:-1] + xf[1:])


@dataclass
class BlockGeometry:
    x1f: np.ndarray
    x2f: np.ndarray
    x3f: np.ndarray
    ng: int
    ng2: int = 0    # no phi ghosts for a single azimuthal cell

    def __post_init__(self):
        self.x1v = centers(self.x1f)
        self.x2v = centers(self.x2f)
        self.x3v = centers(self.x3f)

    @property
    def shape(self):
        return (len(self.x1v), len(self.x2v), len(self.x3v))

    @property
    def is_(self):
        return self.ng

    @property
    def ie(self):
        return len(self.x1v) - self.ng - 1

    @property
    def js(self):
        return self.ng2

    @property
    def je(self):
        return len(self.x2v) - self.ng2 - 1

    @property
    def ks(self):
        return self.ng

    @property
    def ke(self):
        return len(self.x3v) - self.ng - 1


def build_block(nr, nphi, nz, r_min, r_max, z_min, z_max, ng,
                r_rat=1.0, phi_min=0.0, phi_max=2.0*math.pi):
    ng2 = ng if nphi > 1 else 0
    return BlockGeometry(
        x1f=make_faces(r_min, r_max, nr, ng, r_rat),
        x2f=make_faces(phi_min, phi_max, nphi, ng2),
        x3f=make_faces(z_min, z_max, nz, ng),
        ng=ng, ng2=ng2,
    )


def slice_block(glob, i0, n_loc):
    """Radial sub-block of interior cells [i0, i0 + n_loc) of a global block."""
    ng = glob.ng
    return BlockGeometry(
        x1f=glob.x1f[i0:i0 + n_loc + 2*ng + 1].copy(),
        x2f=glob.x2f, x3f=glob.x3f, ng=ng, ng2=glob.ng2,
    )


def split_extent(n_glob, size, rank):
    # contiguous slabs; the first n_glob % size ranks get one extra cell
    counts = [n_glob // size]*size
    for r in range(n_glob % size): counts[r] += 1
    offsets = [0]*size
    for r in range(1, size): offsets[r] = offsets[r-1] + counts[r-1]
    return counts[rank], offsets[rank], counts, offsets


def alloc_prims(geom):
    return np.zeros((NHYDRO,) + geom.shape, dtype=np.float64)

# srjet/utils/io_utils.py
import glob
import json
import os
from datetime import datetime

import numpy as np


def make_run_dir(base="results", unique=False, now=None):
    """
    Run directory stamped with the date, plus the time of day when unique:
    results/YYYY-MM-DD/ or results/YYYY-MM-DD/HH-MM-SS/
    """
    now = now or datetime.now()
    parts = [base, now.strftime("%Y-%m-%d")]
    if unique:
        parts.append(now.strftime("%H-%M-%S"))
    path = os.path.join(*parts)
    os.makedirs(path, exist_ok=True)
    return path


def latest_run_dir(base="results"):
    """Newest run under base: the last time-stamped subdirectory if the date has any."""
    dates = sorted(d for d in glob.glob(os.path.join(base, "*")) if os.path.isdir(d))
    if not dates:
        raise SystemExit(f"No runs found under {base}/")
    times = sorted(d for d in glob.glob(os.path.join(dates[-1], "*")) if os.path.isdir(d))
    return times[-1] if times else dates[-1]


def write_run_config(run_dir, settings):
    path = os.path.join(run_dir, "run_config.json")
    with open(path, "w") as f:
        json.dump(settings, f, indent=2, sort_keys=True, default=str)
    return path


def write_block(run_dir, rank, prim, b, bcc, geom):
    """One NPZ per rank: primitives, face and cell-centred field, coordinates (ghosts included)."""
    fname = os.path.join(run_dir, f"jet_inflow_rank{rank:04d}.npz")
    out = dict(
        rho=prim[0], vr=prim[1], vphi=prim[2], vz=prim[3], p=prim[4],
        x1f=geom.x1f, x2f=geom.x2f, x3f=geom.x3f,
        meta=np.array([geom.ng, geom.ng2], dtype=np.int64),
    )
    if b is not None:
        out.update(b1=b.b1, b2=b.b2, b3=b.b3,
                   Br=bcc[0], Bphi=bcc[1], Bz=bcc[2])
    np.savez(fname, **out)
    return fname

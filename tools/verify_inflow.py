#!/usr/bin/env python3
import argparse
import os, glob, numpy as np

from srjet.core.face_field import FaceField, divergence
from srjet.core.mesh import BlockGeometry
from srjet.utils.io_utils import latest_run_dir

def main():
    ap = argparse.ArgumentParser(description="Verify jet inflow output sanity checks.")
    ap.add_argument("--max-divb-rel", type=float, default=1e-10)
    ap.add_argument("--run-dir", default=None)
    args = ap.parse_args()

    run_dir = args.run_dir or latest_run_dir()
    files = sorted(glob.glob(os.path.join(run_dir, "jet_inflow_rank*.npz")))
    if not files: raise SystemExit(f"No NPZ files in {run_dir}")

    worst = 0.0
    for npz in files:
        print(f"[verify-inflow] using {npz}")
        data = np.load(npz)
        ng, ng2 = [int(v) for v in data["meta"]]
        geom = BlockGeometry(x1f=data["x1f"], x2f=data["x2f"], x3f=data["x3f"], ng=ng, ng2=ng2)
        ghost = slice(0, ng)   # lower-z ghost layers

        for key in ("rho", "vr", "vphi", "vz", "p"):
            arr = data[key][:, :, ghost]
            if not np.isfinite(arr).all():
                raise SystemExit(f"non-finite {key} on the inflow face in {npz}")
        rho = data["rho"][:, :, ghost]
        if rho.min() <= 0.0:
            raise SystemExit(f"non-positive density on the inflow face in {npz}")
        print(f"[verify-inflow] inflow rho min/max = {rho.min():.6e} / {rho.max():.6e}")
        print(f"[verify-inflow] inflow vz  max     = {data['vz'][:, :, ghost].max():.6e}")

        if "b1" not in data:
            continue
        b = FaceField(b1=data["b1"], b2=data["b2"], b3=data["b3"])
        divb = divergence(b, geom)
        # cells at or outside the inner edge; mirrored faces are not curl-consistent
        ok = geom.x1f[:-1] >= geom.x1f[ng]
        divb = divb[ok][:, :, ghost]
        dr = np.diff(geom.x1f)[ok]
        bnorm = np.sqrt(data["Br"]**2 + data["Bphi"]**2 + data["Bz"]**2)
        denom = max(np.max(bnorm) / max(dr.min(), 1e-12), 1e-12)
        rel = np.max(np.abs(divb)) / denom
        print(f"[verify-inflow] divB max / (|B|/dr) = {rel:.6e}")
        worst = max(worst, rel)

    if worst > args.max_divb_rel:
        raise SystemExit(f"divB relative {worst:.3e} > {args.max_divb_rel}")
    print("[verify-inflow] all checks passed")

if __name__ == "__main__":
    main()

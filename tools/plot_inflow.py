#!/usr/bin/env python3
import argparse
import os, glob, numpy as np
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from srjet.utils.io_utils import latest_run_dir

def load_profiles(run_dir):
    files = sorted(glob.glob(os.path.join(run_dir, "jet_inflow_rank*.npz")))
    if not files: raise SystemExit(f"No NPZ files in {run_dir}")
    cols = {"r": [], "rho": [], "vr": [], "vphi": [], "vz": [], "Bz": []}
    for fn in files:
        blk = np.load(fn)
        ng = int(blk["meta"][0])
        x1f = blk["x1f"]
        r = 0.5*(x1f[:-1] + x1f[1:])[ng:-ng]
        k = ng - 1   # ghost layer adjacent to the domain
        cols["r"].append(r)
        for key in ("rho", "vr", "vphi", "vz"):
            cols[key].append(blk[key][ng:-ng, 0, k])
        cols["Bz"].append(blk["Bz"][ng:-ng, 0, k] if "Bz" in blk else np.zeros_like(r))
    return {k: np.concatenate(v) for k, v in cols.items()}

def main():
    ap = argparse.ArgumentParser(description="Plot radial profiles of the jet inflow face.")
    ap.add_argument("--run-dir", default=None)
    args = ap.parse_args()

    run_dir = args.run_dir or latest_run_dir()
    prof = load_profiles(run_dir)
    print(f"[plot-inflow] Using {run_dir}")

    fig, axes = plt.subplots(2, 2, figsize=(9, 7), sharex=True)
    axes[0, 0].plot(prof["r"], prof["rho"]); axes[0, 0].set_ylabel("rho")
    axes[0, 1].plot(prof["r"], prof["vz"], label="u_z")
    axes[0, 1].plot(prof["r"], prof["vr"], label="u_r")
    axes[0, 1].plot(prof["r"], prof["vphi"], label="u_phi")
    axes[0, 1].legend(); axes[0, 1].set_ylabel("four-velocity")
    G = np.sqrt(1.0 + prof["vr"]**2 + prof["vphi"]**2 + prof["vz"]**2)
    axes[1, 0].plot(prof["r"], G); axes[1, 0].set_ylabel("Gamma")
    axes[1, 1].plot(prof["r"], prof["Bz"]); axes[1, 1].set_ylabel("B_z")
    for ax in axes[1]:
        ax.set_xlabel("r")
    fig.suptitle("Jet inflow face (phi index 0)")
    out_png = os.path.join(run_dir, "inflow_profiles.png")
    fig.savefig(out_png, dpi=150)
    print(f"[plot-inflow] wrote {out_png}")

if __name__ == "__main__":
    main()

# srjet/utils/settings.py
import argparse, os
import math

import json5

from srjet.core.params import from_config


def _load_json5_or_json(path: str) -> dict:
    # json5 also reads plain JSON
    with open(path, "r") as f:
        return json5.load(f)


def default_settings():
    return dict(
        # cylindrical grid (r, phi, z)
        NR=64, NPHI=1, NZ=64,
        R_MIN=0.0, R_MAX=4.0, R_RAT=1.0,
        PHI_MIN=0.0, PHI_MAX=2.0*math.pi,
        Z_MIN=0.0, Z_MAX=8.0,
        NG=2, GAMMA=4.0/3.0,
        MAGNETIC=True,
        SIGMA_REFINE=0.01,
        # jet/ambient problem block, input-file key names
        problem={},
        # results
        OUT_DIR="results",
        RESULTS_UNIQUE=False,       # False → results/YYYY-MM-DD/, True → results/YYYY-MM-DD/HH-MM-SS/
        # debug
        DEBUG=False,
    )


def load_settings(argv=None):
    ap = argparse.ArgumentParser(description="Magnetized rotating jet inflow boundary")
    ap.add_argument("--config", type=str, help="path to JSON/JSON5 config")
    ap.add_argument("--debug", action="store_true", help="print clamp diagnostics as they happen")
    # quick overrides
    ap.add_argument("--nr", type=int); ap.add_argument("--nphi", type=int); ap.add_argument("--nz", type=int)
    ap.add_argument("--out", type=str, help="results base directory")
    args = ap.parse_args(argv)

    cfg = {}
    if args.config:
        if not os.path.exists(args.config):
            raise FileNotFoundError(f"config file not found: {args.config}")
        cfg = _load_json5_or_json(args.config)

    s = default_settings()
    problem = {**s["problem"], **cfg.pop("problem", {})}
    s = {**s, **cfg, "problem": problem}
    if args.debug: s["DEBUG"] = True
    if args.nr is not None: s["NR"] = args.nr
    if args.nphi is not None: s["NPHI"] = args.nphi
    if args.nz is not None: s["NZ"] = args.nz
    if args.out is not None: s["OUT_DIR"] = args.out

    # light validation
    if s["NG"] < 2:
        raise ValueError("NG must be >= 2 (two ghost layers on the inflow face).")
    if min(s["NR"], s["NPHI"], s["NZ"]) < 1:
        raise ValueError("NR, NPHI, NZ must be >= 1.")
    if not s["R_MAX"] > s["R_MIN"] >= 0.0:
        raise ValueError("need 0 <= R_MIN < R_MAX.")
    if not s["Z_MAX"] > s["Z_MIN"]:
        raise ValueError("need Z_MIN < Z_MAX.")

    return s


def physical_parameters(s):
    """PhysicalParameters from a settings dict; raises ConfigError."""
    return from_config(s["problem"], s["GAMMA"], s["R_MIN"], s["R_RAT"], s["MAGNETIC"])

#!/usr/bin/env python3
# srjet/solvers/jet_inflow.py: jet inflow boundary on a cylindrical (r, phi, z) mesh
# MPI radial-slab decomposition; each rank builds its block, runs the problem
# generator and one boundary refresh, then writes its slab and the diagnostics.
#
# Usage:
#   python3 -m pip install -e .
#   mpirun -np 2 srjet-inflow --config config/jet_inflow.json5
import sys

from mpi4py import MPI

from srjet.core.adaptivity import flag_for, max_magnetization
from srjet.core.boundary import JetInflowBoundary, prepare_block
from srjet.core.face_field import cell_centered_field
from srjet.core.mesh import build_block, slice_block, split_extent
from srjet.core.params import ConfigError
from srjet.utils.diagnostics import reduce_and_write
from srjet.utils.io_utils import make_run_dir, write_block, write_run_config
from srjet.utils.settings import load_settings, physical_parameters


def build_local_block(s, comm):
    glob = build_block(s["NR"], s["NPHI"], s["NZ"], s["R_MIN"], s["R_MAX"],
                       s["Z_MIN"], s["Z_MAX"], s["NG"], r_rat=s["R_RAT"],
                       phi_min=s["PHI_MIN"], phi_max=s["PHI_MAX"])
    nr_loc, offs, _, _ = split_extent(s["NR"], comm.Get_size(), comm.Get_rank())
    return slice_block(glob, offs, nr_loc), offs


def main(argv=None):
    comm = MPI.COMM_WORLD
    rank = comm.Get_rank()
    size = comm.Get_size()

    s = load_settings(argv)
    try:
        pp = physical_parameters(s)
    except ConfigError as exc:
        if rank == 0:
            print(f"[startup] configuration error: {exc}", flush=True)
        sys.exit(f"configuration error: {exc}")

    if size > s["NR"]:
        sys.exit(f"more ranks ({size}) than radial cells ({s['NR']})")

    run_dir = make_run_dir(base=s["OUT_DIR"], unique=s["RESULTS_UNIQUE"]) if rank == 0 else None
    run_dir = comm.bcast(run_dir, root=0)
    if rank == 0:
        print(f"[startup] run directory: {run_dir}", flush=True)
        print(f"[startup] ranks={size} grid={s['NR']}x{s['NPHI']}x{s['NZ']} "
              f"NG={s['NG']} magnetic={pp.magnetic} debug={s['DEBUG']}", flush=True)
        write_run_config(run_dir, s)

    geom, offs = build_local_block(s, comm)
    bc = JetInflowBoundary(pp, verbose=s["DEBUG"])

    prim, b = prepare_block(geom, bc)

    if b is not None:
        bcc = cell_centered_field(b)
        sigma = max_magnetization(prim, bcc, geom)
        flag = flag_for(sigma, s["SIGMA_REFINE"])
    else:
        bcc = None
        sigma, flag = 0.0, 0

    fname = write_block(run_dir, rank, prim, b, bcc, geom)
    if rank == 0:
        print(f"[io] wrote {fname} (i0={offs})", flush=True)

    g_sigma, g_flag, counts = reduce_and_write(bc.diag, sigma, flag, comm, rank,
                                               run_dir, s["NR"], s["NZ"])
    if rank == 0:
        print(f"[diag] maxSigma={g_sigma:.3e} refine={g_flag} clamps={counts}", flush=True)
        print("Done.", flush=True)


if __name__ == "__main__":
    main()

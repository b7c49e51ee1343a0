# srjet/utils/diagnostics.py
import os
from mpi4py import MPI

from srjet.utils.counters import KEYS


def reduce_and_write(diag, local_sigma, local_flag, comm, rank, run_dir, nr, nz):
    """
    Combine per-rank clamp counts and magnetization maxima; rank 0 appends a
    row to diagnostics.csv. Returns (global_sigma, global_flag, counts).
    """
    global_sigma = comm.allreduce(local_sigma, op=MPI.MAX)
    global_flag = comm.allreduce(local_flag, op=MPI.MAX)
    counts = {k: comm.allreduce(diag.counts[k], op=MPI.SUM) for k in KEYS}

    if rank == 0:
        fn = os.path.join(run_dir, "diagnostics.csv")
        new = not os.path.exists(fn)
        with open(fn, "a") as f:
            if new:
                f.write("ranks,nr,nz,maxSigma,refine," + ",".join(KEYS) + "\n")
            f.write(f"{comm.Get_size()},{nr},{nz},{global_sigma:.6e},{global_flag},"
                    + ",".join(str(counts[k]) for k in KEYS) + "\n")

    return global_sigma, global_flag, counts

#!/usr/bin/env python3
# srjet/core/roots.py
# Bracketed root finding for monotonic scalar relations.

XTOL = 1e-12
FTOL = 1e-13
MAX_ITER = 200


class RootSolveError(ArithmeticError):
    """
    Raised when the bracket is invalid or the iteration does not converge.
    `best` is the lowest-residual point evaluated, so callers can clamp to it;
    `reason` is "bracket" or "maxiter".
    """
    def __init__(self, msg, best, reason):
        super().__init__(msg)
        self.best = best
        self.reason = reason


def solve_monotonic_root(func, bracket, xtol=XTOL, ftol=FTOL, max_iter=MAX_ITER):
    """
    Root of func on bracket=(lo, hi) by false position with the Illinois
    modification: when the same endpoint survives two steps in a row, the
    function value kept at the other endpoint is halved, so the bracket keeps
    shrinking from both sides.

    Stops when |func(c)| <= ftol or the bracket is narrower than xtol.
    Residuals at the endpoints are checked first so exact hits return at once.
    """
    a, b = float(bracket[0]), float(bracket[1])
    fa = func(a)
    fb = func(b)
    if abs(fa) <= ftol:
        return a
    if abs(fb) <= ftol:
        return b

    best, fbest = (a, fa) if abs(fa) <= abs(fb) else (b, fb)
    if fa * fb > 0.0:
        raise RootSolveError(f"root not bracketed on [{a}, {b}] (f={fa:.3e}, {fb:.3e})", best, "bracket")

    side = 0
    for _ in range(max_iter):
        c = (a * fb - b * fa) / (fb - fa)
        fc = func(c)
        if abs(fc) < abs(fbest):
            best, fbest = c, fc
        if abs(fc) <= ftol:
            return c
        if fc * fb > 0.0:
            b, fb = c, fc
            if side == -1:
                fa *= 0.5
            side = -1
        else:
            a, fa = c, fc
            if side == +1:
                fb *= 0.5
            side = +1
        if abs(b - a) < xtol:
            return c
    raise RootSolveError(f"no convergence after {max_iter} iterations on [{a}, {b}]", best, "maxiter")

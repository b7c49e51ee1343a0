#!/usr/bin/env python3
# srjet/utils/counters.py
# Tallies of per-cell numerical clamps applied during a boundary refresh.

KEYS = ("root_bracket", "root_maxiter", "lorentz", "radius")


class ClampCounters:
    def __init__(self):
        self.counts = dict.fromkeys(KEYS, 0)

    def bump(self, key, n=1):
        if key not in self.counts:
            raise KeyError(f"unknown clamp counter: {key}")
        self.counts[key] += n

    def total(self):
        return sum(self.counts.values())

    def reset(self):
        for k in self.counts:
            self.counts[k] = 0

    def as_dict(self):
        return dict(self.counts)

    def __repr__(self):
        inner = " ".join(f"{k}={v}" for k, v in self.counts.items())
        return f"ClampCounters({inner})"


def bump(diag, key):
    # diag is optional everywhere in the core
    if diag is not None:
        diag.bump(key)

#!/usr/bin/env python3
# srjet/core/params.py
# Physical parameters of the jet/ambient problem and the invariants derived from them.
import math
from dataclasses import dataclass, fields

from srjet.core import eos
from srjet.core.profiles import bphi_profile, jet_weight


class ConfigError(ValueError):
    """Missing or invalid problem parameter; fatal at initialization."""


# config key -> PhysicalParameters field
HYDRO_KEYS = {
    "d": "d_amb", "p": "p_amb", "vx": "vx_amb", "vy": "vy_amb", "vz": "vz_amb",
    "djet": "d_jet", "pjet": "p_jet",
    "vxjet": "vx_jet", "vyjet": "vy_jet", "vzjet": "vz_jet",
    "rjet": "r_jet", "drjet": "dr_jet",
}
FIELD_KEYS = {
    "bx": "bx_amb", "by": "by_amb", "bz": "bz_amb",
    "bxjet": "bx_jet", "byjet": "by_jet", "bzjet": "bz_jet",
    "b0": "b0", "z0": "z0",
}
OPTIONAL_KEYS = {"mang": 0.0, "dang": 0.0}
# used only when magnetic fields are disabled
FIELD_DEFAULTS = {"bx": 0.0, "by": 0.0, "bz": 0.0,
                  "bxjet": 0.0, "byjet": 0.0, "bzjet": 0.0,
                  "b0": 0.0, "z0": 1.0}


@dataclass(frozen=True)
class PhysicalParameters:
    # ambient medium
    d_amb: float
    p_amb: float
    vx_amb: float
    vy_amb: float
    vz_amb: float
    # jet
    d_jet: float
    p_jet: float
    vx_jet: float   # sets the opening angle (vxjet/vzjet)
    vy_jet: float   # sets the rotation at the jet boundary
    vz_jet: float
    r_jet: float
    dr_jet: float
    # geometry / thermodynamics
    gamma: float
    x1min: float
    x1rat: float = 1.0
    # fields
    magnetic: bool = True
    bx_amb: float = 0.0
    by_amb: float = 0.0
    bz_amb: float = 0.0
    bx_jet: float = 0.0
    by_jet: float = 0.0
    bz_jet: float = 0.0
    b0: float = 0.0
    z0: float = 1.0
    # azimuthal perturbation of the jet boundary
    mang: float = 0.0
    dang: float = 0.0

    @property
    def gam_add(self):
        return self.gamma / (self.gamma - 1.0)

    def validate(self):
        bad = [f.name for f in fields(self)
               if f.name != "magnetic" and not math.isfinite(getattr(self, f.name))]
        if bad:
            raise ConfigError(f"non-finite problem parameters: {', '.join(bad)}")
        for name in ("d_amb", "d_jet", "p_amb", "p_jet", "r_jet", "dr_jet", "z0", "x1rat"):
            if getattr(self, name) <= 0.0:
                raise ConfigError(f"{name} must be > 0 (got {getattr(self, name)})")
        if self.gamma <= 1.0:
            raise ConfigError(f"adiabatic index must be > 1 (got {self.gamma})")
        if self.x1min < 0.0:
            raise ConfigError(f"inner radius must be >= 0 (got {self.x1min})")
        return self


@dataclass(frozen=True)
class DerivedInvariants:
    gamma_amb: float
    gamma_jet: float
    atw_amb: float
    atw_jet: float
    atw_jet_eq: float
    hg_amb: float
    hg_jet: float
    bern_amb: float
    bern_jet: float
    bphi_axis: float
    bphi_core: float
    rang_amb: float
    rang_jet: float
    phang_amb: float
    phang_jet: float
    a: float
    d: float


def _read(problem, key, default=None):
    val = problem.get(key, default)
    try:
        return float(val)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"problem/{key} must be a number (got {val!r})") from exc


def from_config(problem, gamma, x1min, x1rat=1.0, magnetic=True):
    """
    Build PhysicalParameters from a 'problem' block using the input-file key names
    (d, p, vx, ..., djet, ..., rjet, drjet, mang, dang, b0, z0 ...).
    Raises ConfigError naming the missing keys or the offending value.
    """
    required = dict(HYDRO_KEYS)
    if magnetic:
        required.update(FIELD_KEYS)
    missing = sorted(k for k in required if k not in problem)
    if missing:
        raise ConfigError(f"missing problem parameters: {', '.join(missing)}")

    kw = {name: _read(problem, key) for key, name in required.items()}
    if not magnetic:
        for key, name in FIELD_KEYS.items():
            kw[name] = _read(problem, key, FIELD_DEFAULTS[key])
    for key, default in OPTIONAL_KEYS.items():
        kw[key] = _read(problem, key, default)

    try:
        gamma = float(gamma)
        x1min = float(x1min)
        x1rat = float(x1rat)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"invalid mesh/hydro parameter: {exc}") from exc

    pp = PhysicalParameters(gamma=gamma, x1min=x1min, x1rat=x1rat,
                            magnetic=bool(magnetic), **kw)
    return pp.validate()


def _ratio(num, den):
    # transverse/axial ratio; no axial motion means no rotation or opening
    if den == 0.0:
        return 0.0
    return num / den


def derive_invariants(pp):
    g = pp.gamma
    k = pp.gam_add
    gamma_amb = eos.lorentz_from_four_velocity(pp.vx_amb, pp.vy_amb, pp.vz_amb)
    gamma_jet = eos.lorentz_from_four_velocity(pp.vx_jet, pp.vy_jet, pp.vz_jet)

    a = 0.5 * pp.r_jet
    bphi_core = bphi_profile(pp.r_jet, pp.b0, a)
    bphi_axis = bphi_profile(pp.x1min, pp.b0, a) * jet_weight(pp.x1min, pp.r_jet, pp.dr_jet)

    # pressure is held at the ambient value across the inflow face
    hg_amb = eos.enthalpy(pp.d_amb, pp.p_amb, g) * gamma_amb
    hg_jet = eos.enthalpy(pp.d_jet, pp.p_jet, g) * gamma_jet
    bern_amb = hg_amb
    bern_jet = ((1.0 + k * pp.p_amb / pp.d_jet) * gamma_jet
                + bphi_axis * bphi_axis / (gamma_jet * pp.d_jet))

    return DerivedInvariants(
        gamma_amb=float(gamma_amb),
        gamma_jet=float(gamma_jet),
        atw_amb=float(gamma_amb**2 * eos.enthalpy_density(pp.d_amb, pp.p_amb, g)),
        atw_jet=float(gamma_jet**2 * eos.enthalpy_density(pp.d_jet, pp.p_jet, g)),
        atw_jet_eq=float(gamma_jet**2 * (pp.d_jet + k * pp.p_amb)),
        hg_amb=float(hg_amb),
        hg_jet=float(hg_jet),
        bern_amb=float(bern_amb),
        bern_jet=float(bern_jet),
        bphi_axis=bphi_axis,
        bphi_core=bphi_core,
        rang_amb=_ratio(pp.vx_amb, pp.vz_amb),
        rang_jet=_ratio(pp.vx_jet, pp.vz_jet),
        phang_amb=_ratio(pp.vy_amb, pp.vz_amb),
        phang_jet=_ratio(pp.vy_jet, pp.vz_jet),
        a=a,
        d=1.0 / (4.0 * pp.dr_jet**3),
    )

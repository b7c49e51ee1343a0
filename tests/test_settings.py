"""Tests for settings loading and the problem-block hand-off."""

from __future__ import annotations

import pytest

from srjet.core.params import ConfigError
from srjet.utils.settings import load_settings, physical_parameters

CONFIG = """
// small rotating jet
{
  NR: 8, NZ: 4, R_MAX: 2.0, Z_MAX: 1.0,
  problem: {
    d: 1.0, p: 0.01, vx: 0.0, vy: 0.0, vz: 0.0,
    bx: 0.0, by: 0.0, bz: 0.0,
    djet: 0.1, pjet: 0.01, vxjet: 0.2, vyjet: 0.5, vzjet: 5.0,
    bxjet: 0.0, byjet: 0.0, bzjet: 0.0,
    b0: 0.3, z0: 1.0, rjet: 1.0, drjet: 0.1,
  },
}
"""


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "jet.json5"
    path.write_text(CONFIG)
    return str(path)


def test_defaults_without_config():
    s = load_settings([])
    assert s["NG"] == 2
    assert s["problem"] == {}
    assert s["DEBUG"] is False


def test_config_and_overrides(config_file):
    s = load_settings(["--config", config_file, "--nr", "16", "--debug", "--out", "runs"])
    assert s["NR"] == 16
    assert s["NZ"] == 4
    assert s["R_MAX"] == 2.0
    assert s["DEBUG"] is True
    assert s["OUT_DIR"] == "runs"
    assert s["problem"]["vzjet"] == 5.0


def test_physical_parameters(config_file):
    pp = physical_parameters(load_settings(["--config", config_file]))
    assert pp.r_jet == 1.0
    assert pp.x1min == 0.0
    assert pp.mang == 0.0
    assert pp.magnetic


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_settings(["--config", str(tmp_path / "nope.json5")])


def test_rejects_too_few_ghosts(tmp_path):
    path = tmp_path / "bad.json5"
    path.write_text("{NG: 1}")
    with pytest.raises(ValueError, match="NG"):
        load_settings(["--config", str(path)])


def test_empty_problem_block():
    with pytest.raises(ConfigError, match="missing problem parameters"):
        physical_parameters(load_settings([]))

"""Pytest configuration and shared fixtures for amr_params tests."""

import pytest

from amr_params.config.enums import VariableType
from amr_params.config.parameter_source import ParameterSource
from amr_params.config.plot_vars import VariableTable


# Fixtures for variable tables


@pytest.fixture
def evolution_names():
    """Evolution variables of a small scalar-field model."""
    return ["phi", "Pi", "chi", "K"]


@pytest.fixture
def diagnostic_names():
    """Diagnostic variables computed for output only."""
    return ["Ham", "Mom", "rho"]


@pytest.fixture
def evolution_table(evolution_names):
    return VariableTable(evolution_names, VariableType.EVOLUTION)


@pytest.fixture
def diagnostic_table(diagnostic_names):
    return VariableTable(diagnostic_names, VariableType.DIAGNOSTIC)


# Fixtures for parameter sets


@pytest.fixture
def base_params():
    """Smallest parameter set that builds: a periodic 16^3 unit box."""
    return {
        "N": 16,
        "L": 1.0,
        "regrid_interval": [1],
        "chk_prefix": "chk_",
        "plot_prefix": "plt_",
    }


@pytest.fixture
def make_source():
    """Factory building a ParameterSource from keyword overrides."""

    def _make(params=None, **overrides):
        merged = dict(params or {})
        merged.update(overrides)
        return ParameterSource(merged)

    return _make


@pytest.fixture
def reflective_x_params(base_params):
    """Octant-style setup: reflective low-x face, Sommerfeld elsewhere."""
    params = dict(base_params)
    del params["N"]
    params.update(
        {
            "isPeriodic": [False, True, True],
            "lo_boundary": [2, 0, 0],
            "hi_boundary": [1, 0, 0],
            "vars_parity": [0, 1, 0, 0],
            "vars_asymptotic_values": [0.0, 0.0, 1.0, 0.0],
            "N1_full": 32,
            "N2": 16,
            "N3": 16,
        }
    )
    return params

"""Tests for error types and soft safety checks."""

import warnings

import pytest

from amr_params import create_grid_configuration
from amr_params.config.enums import ErrorCode
from amr_params.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    ConflictingParametersError,
    InvalidParameterError,
    MissingParameterError,
    warn_if_unsafe,
)


class TestConfigurationError:
    """Tests for the typed errors."""

    @pytest.mark.parametrize(
        "error_cls, code",
        [
            (MissingParameterError, ErrorCode.MISSING_REQUIRED_PARAMETER),
            (ConflictingParametersError, ErrorCode.CONFLICTING_PARAMETERS),
            (InvalidParameterError, ErrorCode.INVALID_VALUE),
        ],
    )
    def test_subclass_codes(self, error_cls, code):
        error = error_cls("bad", keys=["N"])
        assert isinstance(error, ConfigurationError)
        assert error.code == code
        assert error.keys == ("N",)

    def test_message_names_code_and_keys(self):
        error = ConflictingParametersError("Supply either N or N_full", keys=["N", "N_full"])
        assert str(error) == (
            "[conflicting_parameters] Supply either N or N_full (keys: N, N_full)"
        )

    def test_explicit_code(self):
        error = ConfigurationError("bad", code=ErrorCode.MISSING_REQUIRED_PARAMETER)
        assert error.code == ErrorCode.MISSING_REQUIRED_PARAMETER
        assert str(error) == "[missing_required_parameter] bad"


class TestWarnIfUnsafe:
    """Tests for soft warnings on a finished configuration."""

    def test_default_config_is_quiet(self, base_params, evolution_names):
        config = create_grid_configuration(base_params, evolution_names)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert warn_if_unsafe(config) == []

    def test_few_ghosts(self, base_params, evolution_names):
        config = create_grid_configuration(dict(base_params, num_ghosts=2), evolution_names)
        with pytest.warns(ConfigurationWarning, match="num_ghosts"):
            messages = warn_if_unsafe(config)
        assert len(messages) == 1

    def test_plot_interval_without_variables(self, base_params, evolution_names):
        params = dict(base_params, plot_interval=10, num_plot_vars=1, plot_vars=["nope"])
        config = create_grid_configuration(params, evolution_names)
        with pytest.warns(ConfigurationWarning, match="plot_interval"):
            warn_if_unsafe(config)

    def test_several_warnings(self, base_params, evolution_names):
        params = dict(base_params, fill_ratio=1.5, dt_multiplier=2.0)
        config = create_grid_configuration(params, evolution_names)
        with pytest.warns(ConfigurationWarning):
            messages = warn_if_unsafe(config)
        assert len(messages) == 2

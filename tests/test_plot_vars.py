"""Tests for plot variable resolution."""

import logging

import pytest

from amr_params.config.enums import VariableType
from amr_params.config.plot_vars import (
    PlotVariable,
    VariableTable,
    resolve_plot_vars,
    resolve_variable,
)
from amr_params.config.validation import InvalidParameterError


class TestVariableTable:
    """Tests for a single name table."""

    def test_lookup(self, evolution_table):
        assert evolution_table.name_to_index("phi") == 0
        assert evolution_table.name_to_index("K") == 3
        assert evolution_table.name_to_index("rho") is None
        assert evolution_table.name_of(2) == "chi"
        assert len(evolution_table) == 4
        assert "Pi" in evolution_table

    def test_duplicate_names_rejected(self):
        with pytest.raises(ValueError):
            VariableTable(["phi", "phi"], VariableType.EVOLUTION)


class TestResolveVariable:
    """Tests for lookup over several tables."""

    def test_evolution_first(self, evolution_table, diagnostic_table):
        var = resolve_variable("chi", [evolution_table, diagnostic_table])
        assert var == PlotVariable(2, VariableType.EVOLUTION)

    def test_falls_back_to_diagnostic(self, evolution_table, diagnostic_table):
        var = resolve_variable("Mom", [evolution_table, diagnostic_table])
        assert var == PlotVariable(1, VariableType.DIAGNOSTIC)

    def test_order_decides_shared_names(self):
        """A name in both tables resolves against the first one."""
        evolution = VariableTable(["rho"], VariableType.EVOLUTION)
        diagnostic = VariableTable(["x", "rho"], VariableType.DIAGNOSTIC)
        assert resolve_variable("rho", [evolution, diagnostic]).var_type == VariableType.EVOLUTION
        assert resolve_variable("rho", [diagnostic, evolution]) == PlotVariable(
            1, VariableType.DIAGNOSTIC
        )

    def test_unresolved(self, evolution_table, diagnostic_table):
        assert resolve_variable("unknown_var", [evolution_table, diagnostic_table]) is None


class TestResolvePlotVars:
    """Tests for reading num_plot_vars / plot_vars."""

    def test_unknown_name_dropped(self, make_source, evolution_table, diagnostic_table, caplog):
        """rho resolves as diagnostic, unknown_var is warned about and dropped."""
        source = make_source(num_plot_vars=2, plot_vars=["rho", "unknown_var"])
        with caplog.at_level(logging.WARNING, logger="amr_params.config.plot_vars"):
            plot_vars = resolve_plot_vars(source, evolution_table, diagnostic_table)

        assert plot_vars == (PlotVariable(2, VariableType.DIAGNOSTIC),)
        assert "unknown_var" in caplog.text

    def test_input_order_kept(self, make_source, evolution_table, diagnostic_table):
        source = make_source(num_plot_vars=3, plot_vars="Ham phi K")
        plot_vars = resolve_plot_vars(source, evolution_table, diagnostic_table)
        assert plot_vars == (
            PlotVariable(0, VariableType.DIAGNOSTIC),
            PlotVariable(0, VariableType.EVOLUTION),
            PlotVariable(3, VariableType.EVOLUTION),
        )

    def test_none_requested(self, make_source, evolution_table):
        """num_plot_vars defaults to 0; plot_vars is then ignored."""
        source = make_source(plot_vars=["phi"])
        assert resolve_plot_vars(source, evolution_table) == ()

    def test_short_array_padded_with_empty_names(
        self, make_source, evolution_table, diagnostic_table, caplog
    ):
        """Declared count larger than the array: the gaps resolve to nothing."""
        source = make_source(num_plot_vars=3, plot_vars=["phi"])
        with caplog.at_level(logging.WARNING, logger="amr_params.config.plot_vars"):
            plot_vars = resolve_plot_vars(source, evolution_table, diagnostic_table)
        assert plot_vars == (PlotVariable(0, VariableType.EVOLUTION),)
        assert len(caplog.records) == 2

    def test_extra_names_ignored(self, make_source, evolution_table):
        """Only the first num_plot_vars names are read."""
        source = make_source(num_plot_vars=1, plot_vars=["phi", "Pi"])
        assert resolve_plot_vars(source, evolution_table) == (
            PlotVariable(0, VariableType.EVOLUTION),
        )

    def test_without_diagnostic_table(self, make_source, evolution_table):
        source = make_source(num_plot_vars=1, plot_vars=["Ham"])
        assert resolve_plot_vars(source, evolution_table) == ()

    def test_negative_count(self, make_source, evolution_table):
        with pytest.raises(InvalidParameterError):
            resolve_plot_vars(make_source(num_plot_vars=-1), evolution_table)

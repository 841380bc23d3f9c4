"""Tests for cell count resolution."""

import numpy as np
import pytest

from amr_params.config.boundaries import resolve_boundary_conditions
from amr_params.config.enums import ErrorCode
from amr_params.config.grid_extent import half_domain_count, resolve_grid_extent
from amr_params.config.validation import (
    ConflictingParametersError,
    InvalidParameterError,
    MissingParameterError,
)

REFLECTIVE_X = {
    "isPeriodic": [False, True, True],
    "lo_boundary": [2, 0, 0],
    "hi_boundary": [2, 0, 0],
    "vars_parity": [0, 0],
}


def resolve(source, num_vars=2):
    boundaries = resolve_boundary_conditions(source, num_vars=num_vars)
    return resolve_grid_extent(source, boundaries)


class TestGlobalCounts:
    """Tests for N and N_full."""

    def test_global_half_count(self, make_source):
        """N applies to every axis unchanged."""
        extent = resolve(make_source(N=16))
        np.testing.assert_array_equal(extent.num_cells, [16, 16, 16])
        np.testing.assert_array_equal(extent.num_cells_full, [16, 16, 16])
        assert extent.max_N == 16
        assert extent.max_N_full == 16

    def test_global_full_count_periodic(self, make_source):
        """N_full without reflection equals the half count."""
        extent = resolve(make_source(N_full=32))
        np.testing.assert_array_equal(extent.num_cells, [32, 32, 32])

    def test_global_full_count_halved_on_reflective_axis(self, make_source):
        """N_full is halved only along the reflective axis."""
        extent = resolve(make_source(REFLECTIVE_X, N_full=32))
        np.testing.assert_array_equal(extent.num_cells, [16, 32, 32])
        np.testing.assert_array_equal(extent.num_cells_full, [32, 32, 32])
        assert extent.max_N == 32
        assert extent.max_N_full == 32
        assert extent.symmetric_boundaries_exist

    def test_both_globals_conflict(self, make_source):
        """N and N_full together are rejected."""
        with pytest.raises(ConflictingParametersError) as excinfo:
            resolve(make_source(N=16, N_full=32))
        assert excinfo.value.code == ErrorCode.CONFLICTING_PARAMETERS
        assert set(excinfo.value.keys) == {"N", "N_full"}

    @pytest.mark.parametrize("key", ["N1", "N2_full", "N3"])
    def test_global_with_per_axis_conflict(self, make_source, key):
        """A per-axis key cannot be combined with a global count."""
        with pytest.raises(ConflictingParametersError) as excinfo:
            resolve(make_source(N=16, **{key: 8}))
        assert key in excinfo.value.keys

    @pytest.mark.parametrize("value", [0, -4])
    def test_non_positive_global(self, make_source, value):
        with pytest.raises(InvalidParameterError):
            resolve(make_source(N=value))

    def test_odd_global_full_on_reflective_axis(self, make_source):
        with pytest.raises(InvalidParameterError) as excinfo:
            resolve(make_source(REFLECTIVE_X, N_full=31))
        assert excinfo.value.keys == ("N_full",)


class TestPerAxisCounts:
    """Tests for N{i} and N{i}_full."""

    def test_mixed_forms(self, make_source):
        """Each axis may use either form."""
        extent = resolve(make_source(N1=8, N2_full=16, N3=32))
        np.testing.assert_array_equal(extent.num_cells, [8, 16, 32])
        assert extent.max_N == 32
        np.testing.assert_array_equal(extent.ivN, [7, 15, 31])

    def test_missing_axis(self, make_source):
        """Without a global value every axis needs a count."""
        with pytest.raises(MissingParameterError) as excinfo:
            resolve(make_source(N1=8, N2=8))
        assert excinfo.value.keys == ("N3", "N3_full")

    def test_both_forms_on_one_axis(self, make_source):
        with pytest.raises(ConflictingParametersError) as excinfo:
            resolve(make_source(N1=8, N1_full=16, N2=8, N3=8))
        assert set(excinfo.value.keys) == {"N1", "N1_full"}

    def test_non_positive_per_axis(self, make_source):
        with pytest.raises(InvalidParameterError) as excinfo:
            resolve(make_source(N1=8, N2=0, N3=8))
        assert excinfo.value.keys == ("N2",)

    def test_reflective_even_full_count(self, make_source):
        """N1_full = 32 on a reflective axis gives 16 simulated cells."""
        extent = resolve(make_source(REFLECTIVE_X, N1_full=32, N2=16, N3=16))
        assert extent.num_cells[0] == 16
        assert extent.num_cells_full[0] == 32

    def test_reflective_odd_full_count(self, make_source):
        """N1_full = 31 on the same setup fails."""
        with pytest.raises(InvalidParameterError) as excinfo:
            resolve(make_source(REFLECTIVE_X, N1_full=31, N2=16, N3=16))
        assert excinfo.value.keys == ("N1_full",)

    def test_reflective_half_count_used_directly(self, make_source):
        """N1 is already a half-domain count; the full count is reconstructed."""
        extent = resolve(make_source(REFLECTIVE_X, N1=16, N2=16, N3=16))
        assert extent.num_cells[0] == 16
        assert extent.num_cells_full[0] == 32
        assert extent.max_N_full == 32


class TestHalfFullEquivalence:
    """N and an equivalent N_full give identical half-domain counts."""

    @pytest.mark.parametrize("n", [2, 8, 16, 64])
    def test_periodic(self, make_source, n):
        a = resolve(make_source(N=n))
        b = resolve(make_source(N_full=n))
        np.testing.assert_array_equal(a.num_cells, b.num_cells)

    @pytest.mark.parametrize("n", [2, 8, 16, 64])
    def test_reflective(self, make_source, n):
        a = resolve(make_source(REFLECTIVE_X, N1=n, N2=n, N3=n))
        b = resolve(make_source(REFLECTIVE_X, N1_full=2 * n, N2_full=n, N3_full=n))
        np.testing.assert_array_equal(a.num_cells, b.num_cells)
        np.testing.assert_array_equal(a.num_cells_full, b.num_cells_full)


class TestGridExtentValue:
    """Tests for the resolved value itself."""

    def test_arrays_are_read_only(self, make_source):
        extent = resolve(make_source(N=16))
        with pytest.raises(ValueError):
            extent.num_cells[0] = 3

    def test_half_domain_count_helper(self):
        assert half_domain_count(0, 10, None, True, "N1") == 10
        assert half_domain_count(0, None, 10, True, "N1_full") == 5
        assert half_domain_count(0, None, 11, False, "N1_full") == 11

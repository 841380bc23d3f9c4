"""Grid dimension resolution.

Cell counts can be given in four overlapping forms:

    N_full / N           global full-domain / half-domain count (at most one)
    N{i}_full / N{i}     per-axis variants, used only when no global value is set

"Half-domain" is the count actually simulated; on an axis with a reflective
side it covers the box up to the symmetry plane, so a full-domain count is
halved there. Without reflection both counts coincide.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from amr_params.config.boundaries import BoundaryParams
from amr_params.config.parameter_source import ParameterSource
from amr_params.config.validation import (
    ConflictingParametersError,
    InvalidParameterError,
    MissingParameterError,
)

logger = logging.getLogger(__name__)


def frozen_array(values: Sequence, dtype) -> np.ndarray:
    """Return a read-only copy of `values` as a numpy array."""
    array = np.array(values, dtype=dtype)
    array.flags.writeable = False
    return array


@dataclass(frozen=True, eq=False)
class GridExtent:
    """Resolved cell counts of the coarsest level.

    Attributes:
        num_cells: Half-domain cell count per axis (the simulated cells)
        num_cells_full: Full-domain cell count per axis (2 * num_cells on
            reflective axes, num_cells otherwise)
        nonperiodic_boundaries_exist: Copied from the boundary specification
        symmetric_boundaries_exist: Copied from the boundary specification
    """
    num_cells: np.ndarray
    num_cells_full: np.ndarray
    nonperiodic_boundaries_exist: bool = False
    symmetric_boundaries_exist: bool = False

    @property
    def space_dim(self) -> int:
        return len(self.num_cells)

    @property
    def max_N(self) -> int:
        """Largest half-domain count over all axes."""
        return int(self.num_cells.max())

    @property
    def max_N_full(self) -> int:
        """Largest full-domain count over all axes."""
        return int(self.num_cells_full.max())

    @property
    def ivN(self) -> np.ndarray:
        """Index of the top cell of the coarsest domain box on each axis."""
        return self.num_cells - 1


def half_domain_count(
    direction: int,
    half: Optional[int],
    full: Optional[int],
    reflective: bool,
    key: str,
) -> int:
    """Choose the simulated cell count for one axis.

    A half-domain count is taken as-is. A full-domain count is halved on a
    reflective axis, where it must be even.
    """
    if half is not None:
        return half
    if reflective:
        if full % 2 != 0:
            raise InvalidParameterError(
                f"{key} = {full} must be even on direction {direction}, "
                "which has a reflective boundary",
                keys=[key],
            )
        return full // 2
    return full


def _load_positive_count(source: ParameterSource, key: str) -> int:
    value = source.load(key, dtype=int)
    if value <= 0:
        raise InvalidParameterError(f"{key} must be > 0, got {value}", keys=[key])
    return value


def resolve_grid_extent(source: ParameterSource, boundaries: BoundaryParams) -> GridExtent:
    """Resolve per-axis half- and full-domain cell counts.

    Args:
        source: Parameter source to read from
        boundaries: Resolved boundary specification (decides which axes halve)

    Returns:
        GridExtent for the coarsest level

    Raises:
        ConflictingParametersError: If N and N_full are both given, if a global
            count is combined with a per-axis key, or if both per-axis forms
            are given for one axis
        MissingParameterError: If no global count is set and an axis has no
            per-axis count
        InvalidParameterError: If a count is not positive, or a full-domain
            count on a reflective axis is odd
    """
    if source.contains("N_full") and source.contains("N"):
        raise ConflictingParametersError(
            "Supply either N or N_full, not both", keys=["N", "N_full"]
        )

    global_key = None
    global_half = global_full = None
    if source.contains("N_full"):
        global_key = "N_full"
        global_full = _load_positive_count(source, "N_full")
    elif source.contains("N"):
        global_key = "N"
        global_half = _load_positive_count(source, "N")

    num_cells = []
    for idir in range(boundaries.space_dim):
        name = f"N{idir + 1}"
        name_full = f"N{idir + 1}_full"
        present = [key for key in (name, name_full) if source.contains(key)]

        if global_key is not None:
            if present:
                raise ConflictingParametersError(
                    f"Per-axis cell count cannot be combined with global {global_key}",
                    keys=[global_key] + present,
                )
            half, full, key = global_half, global_full, global_key
        else:
            if len(present) == 2:
                raise ConflictingParametersError(
                    f"Supply either {name} or {name_full} for direction {idir}, not both",
                    keys=present,
                )
            if not present:
                raise MissingParameterError(
                    f"No cell count for direction {idir}: supply N, N_full, {name} or {name_full}",
                    keys=[name, name_full],
                )
            key = present[0]
            half = full = None
            if key == name_full:
                full = _load_positive_count(source, name_full)
            else:
                half = _load_positive_count(source, name)

        num_cells.append(
            half_domain_count(idir, half, full, boundaries.is_reflective(idir), key)
        )

    num_cells_full = [
        2 * n if boundaries.is_reflective(idir) else n for idir, n in enumerate(num_cells)
    ]
    logger.debug(f"Resolved cell counts: N = {num_cells}, N_full = {num_cells_full}")

    return GridExtent(
        num_cells=frozen_array(num_cells, int),
        num_cells_full=frozen_array(num_cells_full, int),
        nonperiodic_boundaries_exist=boundaries.nonperiodic_boundaries_exist,
        symmetric_boundaries_exist=boundaries.symmetric_boundaries_exist,
    )

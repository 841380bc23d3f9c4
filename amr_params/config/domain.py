"""Physical domain size, coarsest resolution and grid center.

L is the physical length of the longest side of the simulated box. With
reflective boundaries the simulated box is only part of the physical domain,
so the full-domain length L_full is converted:

    L = L_full * max_N / max_N_full
    coarsest_dx = L / max_N
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from amr_params.config.boundaries import BoundaryParams
from amr_params.config.defaults import DEFAULT_L
from amr_params.config.grid_extent import GridExtent, frozen_array
from amr_params.config.parameter_source import ParameterSource
from amr_params.config.validation import ConflictingParametersError, InvalidParameterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class DomainLength:
    """Resolved physical size of the coarsest level.

    Attributes:
        L: Length of the longest side of the simulated box
        coarsest_dx: Cell width on the coarsest level
        dx: coarsest_dx on every axis (uniform spacing)
        origin: Location of the first cell center on every axis (dx / 2)
    """
    L: float
    coarsest_dx: float
    dx: np.ndarray
    origin: np.ndarray


def resolve_domain_length(source: ParameterSource, extent: GridExtent) -> DomainLength:
    """Resolve L and the coarsest cell width.

    Raises:
        ConflictingParametersError: If L and L_full are both given
        InvalidParameterError: If the given length is not positive
    """
    if source.contains("L_full") and source.contains("L"):
        raise ConflictingParametersError(
            "Supply either L or L_full, not both", keys=["L", "L_full"]
        )

    if source.contains("L_full"):
        L_full = source.load("L_full", dtype=float)
        if L_full <= 0.0:
            raise InvalidParameterError(f"L_full must be > 0, got {L_full}", keys=["L_full"])
        L = L_full * extent.max_N / extent.max_N_full
    else:
        L = source.load("L", DEFAULT_L, dtype=float)
        if L <= 0.0:
            raise InvalidParameterError(f"L must be > 0, got {L}", keys=["L"])

    coarsest_dx = L / extent.max_N
    logger.debug(f"Resolved L = {L}, coarsest_dx = {coarsest_dx}")

    return DomainLength(
        L=L,
        coarsest_dx=coarsest_dx,
        dx=frozen_array([coarsest_dx] * extent.space_dim, float),
        origin=frozen_array([coarsest_dx / 2.0] * extent.space_dim, float),
    )


def full_domain_length(domain: DomainLength, extent: GridExtent) -> float:
    """Inverse of the L_full conversion: the length of the whole physical domain."""
    return domain.L * extent.max_N_full / extent.max_N


def default_center(extent: GridExtent, domain: DomainLength) -> np.ndarray:
    """Middle of the simulated box on every axis."""
    return 0.5 * extent.num_cells * domain.coarsest_dx


def resolve_center(
    extent: GridExtent,
    domain: DomainLength,
    boundaries: BoundaryParams,
    requested: Optional[Sequence[float]] = None,
) -> np.ndarray:
    """Resolve the grid center, moving it onto symmetry planes.

    Starts from `requested` (or the middle of the box) and, per axis, puts the
    center on the low face if that side is reflective, otherwise on the high
    face if that side is reflective. The low side wins when both are.

    Returns:
        Read-only array of center coordinates
    """
    if requested is None:
        center = default_center(extent, domain)
    else:
        center = np.array(requested, dtype=float)
        if center.shape != (extent.space_dim,):
            raise InvalidParameterError(
                f"center needs {extent.space_dim} entries, got {center.size}", keys=["center"]
            )

    center = np.array(center, dtype=float)
    for idir in range(extent.space_dim):
        if boundaries.lo_boundary[idir].is_reflective:
            center[idir] = 0.0
        elif boundaries.hi_boundary[idir].is_reflective:
            center[idir] = domain.coarsest_dx * extent.num_cells[idir]
    return frozen_array(center, float)


def load_center(
    source: ParameterSource,
    extent: GridExtent,
    domain: DomainLength,
    boundaries: BoundaryParams,
) -> np.ndarray:
    """Read the optional `center` key and resolve it against the boundaries."""
    requested = source.load("center", list(default_center(extent, domain)), dtype=float)
    center = resolve_center(extent, domain, boundaries, requested)
    logger.info(f"Center has been set to: {' '.join(str(c) for c in center)}")
    return center

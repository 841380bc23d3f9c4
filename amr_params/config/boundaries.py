"""Boundary condition resolution.

Turns the periodicity flags and per-axis boundary kinds into a fully populated
BoundaryParams. Resolution is two-phase: a fully defaulted value is built
first, then one override rule per non-periodic axis returns an updated copy.

Keys read:
    isPeriodic              bool[dim], default all true
    lo_boundary/hi_boundary BoundaryType[dim], default all STATIC
    vars_parity             Parity[num_vars], required if an axis is reflective
    vars_asymptotic_values  float[num_vars], required if an axis is Sommerfeld
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from amr_params.config.defaults import (
    DEFAULT_ASYMPTOTIC_VALUE,
    DEFAULT_BOUNDARY_KIND,
    DEFAULT_IS_PERIODIC,
    DEFAULT_PARITY,
    SPACE_DIM,
)
from amr_params.config.enums import BoundaryType, Parity
from amr_params.config.parameter_source import ParameterSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoundaryAxisSpec:
    """Boundary kinds on both sides of one axis.

    Attributes:
        direction: Axis index (0 = x)
        lo: Boundary kind at the low end
        hi: Boundary kind at the high end
        is_periodic: Whether the axis wraps around (lo/hi are then unused
            by the boundary filler)
    """
    direction: int
    lo: BoundaryType
    hi: BoundaryType
    is_periodic: bool

    @property
    def is_reflective(self) -> bool:
        return self.lo.is_reflective or self.hi.is_reflective

    @property
    def is_asymptotic(self) -> bool:
        return self.lo.is_asymptotic or self.hi.is_asymptotic


@dataclass(frozen=True)
class BoundaryParams:
    """Fully resolved boundary specification.

    Attributes:
        is_periodic: Periodic flag per axis
        lo_boundary, hi_boundary: Boundary kind per axis
        vars_parity: Parity of each evolution variable (EVEN unless read)
        vars_asymptotic_values: Far-field value of each evolution variable
            (0.0 unless read)
        nonperiodic_boundaries_exist: True if any axis is non-periodic
        symmetric_boundaries_exist: True if a non-periodic axis has a
            reflective side
    """
    is_periodic: Tuple[bool, ...]
    lo_boundary: Tuple[BoundaryType, ...]
    hi_boundary: Tuple[BoundaryType, ...]
    vars_parity: Tuple[Parity, ...]
    vars_asymptotic_values: Tuple[float, ...]
    nonperiodic_boundaries_exist: bool = False
    symmetric_boundaries_exist: bool = False

    @property
    def space_dim(self) -> int:
        return len(self.is_periodic)

    def axis(self, direction: int) -> BoundaryAxisSpec:
        return BoundaryAxisSpec(
            direction=direction,
            lo=self.lo_boundary[direction],
            hi=self.hi_boundary[direction],
            is_periodic=self.is_periodic[direction],
        )

    @property
    def axes(self) -> Tuple[BoundaryAxisSpec, ...]:
        return tuple(self.axis(idir) for idir in range(self.space_dim))

    def is_reflective(self, direction: int) -> bool:
        """True if either side of `direction` is reflective.

        Periodicity is not consulted: the cell-count halving and the center
        override act on the configured kinds directly.
        """
        return self.axis(direction).is_reflective

    def get_var_parity(self, comp: int, direction: int) -> int:
        """Sign (+1/-1) applied to variable `comp` when reflected across `direction`."""
        return self.vars_parity[comp].sign(direction)


def default_boundary_params(
    num_vars: int,
    lo_boundary: Sequence[BoundaryType],
    hi_boundary: Sequence[BoundaryType],
) -> BoundaryParams:
    """Phase one: every axis periodic, every variable even with zero far-field value."""
    space_dim = len(lo_boundary)
    return BoundaryParams(
        is_periodic=(True,) * space_dim,
        lo_boundary=tuple(lo_boundary),
        hi_boundary=tuple(hi_boundary),
        vars_parity=(Parity(DEFAULT_PARITY),) * num_vars,
        vars_asymptotic_values=(DEFAULT_ASYMPTOTIC_VALUE,) * num_vars,
    )


def apply_nonperiodic_axis(
    params: BoundaryParams, direction: int, source: ParameterSource
) -> BoundaryParams:
    """Phase two rule for one non-periodic axis.

    The per-variable arrays have no defaults so that selecting a reflective or
    Sommerfeld boundary forces the user to state parities/far-field values.
    """
    is_periodic = list(params.is_periodic)
    is_periodic[direction] = False
    updated = replace(params, is_periodic=tuple(is_periodic), nonperiodic_boundaries_exist=True)

    axis = updated.axis(direction)
    num_vars = len(params.vars_parity)
    if axis.is_reflective:
        parity = source.load_array("vars_parity", Parity.parse, count=num_vars)
        updated = replace(updated, vars_parity=tuple(parity), symmetric_boundaries_exist=True)
    if axis.is_asymptotic:
        values = source.load_array("vars_asymptotic_values", float, count=num_vars)
        updated = replace(updated, vars_asymptotic_values=tuple(values))
    return updated


def resolve_boundary_conditions(
    source: ParameterSource,
    num_vars: int,
    space_dim: int = SPACE_DIM,
    var_names: Optional[Sequence[str]] = None,
) -> BoundaryParams:
    """Resolve periodicity and boundary kinds from the parameter source.

    Only the first `space_dim` entries of isPeriodic, lo_boundary and
    hi_boundary are read. Longer arrays are accepted and the surplus is
    ignored (logged at DEBUG).

    Args:
        source: Parameter source to read from
        num_vars: Number of evolution variables (length of the per-variable arrays)
        space_dim: Number of spatial dimensions
        var_names: Optional variable names, only used in the logged summary

    Returns:
        BoundaryParams with defaults filled in

    Raises:
        MissingParameterError: If vars_parity / vars_asymptotic_values are
            required by the selected kinds but not supplied (or too short)
        InvalidParameterError: If a flag or kind cannot be interpreted
    """
    for key in ("isPeriodic", "lo_boundary", "hi_boundary"):
        if source.contains(key):
            supplied = len(source.load_array(key, None))
            if supplied > space_dim:
                logger.debug(
                    f"{key} has {supplied} entries, ignoring all but the first {space_dim}"
                )

    is_periodic = source.load("isPeriodic", [DEFAULT_IS_PERIODIC] * space_dim, dtype=bool)
    default_kind = BoundaryType(DEFAULT_BOUNDARY_KIND)
    hi_boundary = source.load("hi_boundary", [default_kind] * space_dim, dtype=BoundaryType.parse)
    lo_boundary = source.load("lo_boundary", [default_kind] * space_dim, dtype=BoundaryType.parse)

    params = default_boundary_params(num_vars, lo_boundary, hi_boundary)
    for idir in range(space_dim):
        if not is_periodic[idir]:
            params = apply_nonperiodic_axis(params, idir, source)

    if params.nonperiodic_boundaries_exist:
        write_boundary_conditions(params, var_names)
    return params


def write_boundary_conditions(
    params: BoundaryParams, var_names: Optional[Sequence[str]] = None
) -> None:
    """Log a human-readable summary of the non-periodic boundaries."""
    logger.info("Boundary conditions (non-periodic directions):")
    for axis in params.axes:
        if axis.is_periodic:
            logger.info(f"  direction {axis.direction}: periodic")
        else:
            logger.info(
                f"  direction {axis.direction}: lo = {axis.lo.label}, hi = {axis.hi.label}"
            )

    names = list(var_names) if var_names is not None else []

    def name_of(comp):
        return names[comp] if comp < len(names) else f"var {comp}"

    if params.symmetric_boundaries_exist:
        logger.info("  Parity of variables under reflection:")
        for comp, parity in enumerate(params.vars_parity):
            logger.info(f"    {name_of(comp)}: {parity.name}")

    if any(axis.is_asymptotic for axis in params.axes if not axis.is_periodic):
        logger.info("  Asymptotic values of variables:")
        for comp, value in enumerate(params.vars_asymptotic_values):
            logger.info(f"    {name_of(comp)}: {value}")

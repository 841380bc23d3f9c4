"""Configuration Builder

Runs the resolvers in dependency order and returns one immutable
GridConfiguration:

    boundaries -> grid extent -> domain length -> center
               -> levels/output -> plot variables -> box partitioning

Each resolver raises a ConfigurationError subclass on invalid input. Nothing
is caught here, so the first error aborts the build and no partial
configuration is ever returned.

Usage:
    from amr_params.config.builder import build_grid_configuration

    source = ParameterSource.from_inputs_file("params.txt")
    config = build_grid_configuration(source, evolution_vars, diagnostic_vars)
"""

import logging
from typing import Any, Iterable, Mapping, Optional, Union

from amr_params.config.boundaries import resolve_boundary_conditions
from amr_params.config.box_partitioning import resolve_box_partitioning
from amr_params.config.defaults import (
    DEFAULT_CHECKPOINT_INTERVAL,
    DEFAULT_DT_MULTIPLIER,
    DEFAULT_FILL_RATIO,
    DEFAULT_IGNORE_CHECKPOINT_NAME_MISMATCH,
    DEFAULT_MAX_LEVEL,
    DEFAULT_MAX_STEPS,
    DEFAULT_NUM_GHOSTS,
    DEFAULT_PLOT_INTERVAL,
    DEFAULT_REGRID_THRESHOLD,
    DEFAULT_STOP_TIME,
    DEFAULT_TAG_BUFFER_SIZE,
    DEFAULT_VERBOSITY,
    DEFAULT_WRITE_PLOT_GHOSTS,
    REFINEMENT_RATIO,
    SPACE_DIM,
)
from amr_params.config.domain import load_center, resolve_domain_length
from amr_params.config.enums import VariableType
from amr_params.config.grid_config import GridConfiguration
from amr_params.config.grid_extent import resolve_grid_extent
from amr_params.config.parameter_source import ParameterSource
from amr_params.config.plot_vars import VariableTable, resolve_plot_vars
from amr_params.config.validation import ConflictingParametersError, InvalidParameterError

logger = logging.getLogger(__name__)

VariableNames = Union[VariableTable, Iterable[str]]

# Pairs where supplying both keys is always an error
EXCLUSIVE_KEYS = (("N", "N_full"), ("L", "L_full"))


def check_exclusive_keys(source: ParameterSource) -> None:
    """Reject aggregate keys supplied in both forms before any resolver runs."""
    for key, alternative in EXCLUSIVE_KEYS:
        if source.contains(key) and source.contains(alternative):
            raise ConflictingParametersError(
                f"Supply either {key} or {alternative}, not both", keys=[key, alternative]
            )


def _as_table(names: Optional[VariableNames], var_type: VariableType) -> VariableTable:
    if isinstance(names, VariableTable):
        return names
    return VariableTable(names or (), var_type)


def build_grid_configuration(
    source: ParameterSource,
    evolution_vars: VariableNames,
    diagnostic_vars: Optional[VariableNames] = None,
    space_dim: int = SPACE_DIM,
) -> GridConfiguration:
    """Resolve a complete grid configuration from a parameter source.

    Args:
        source: Parameter source to read from
        evolution_vars: Evolution variable names (or a VariableTable); their
            count sets the length of vars_parity / vars_asymptotic_values
        diagnostic_vars: Diagnostic variable names (or a VariableTable)
        space_dim: Number of spatial dimensions

    Returns:
        Immutable GridConfiguration

    Raises:
        ConfigurationError: On the first missing, conflicting or invalid parameter
    """
    check_exclusive_keys(source)
    evolution = _as_table(evolution_vars, VariableType.EVOLUTION)
    diagnostic = _as_table(diagnostic_vars, VariableType.DIAGNOSTIC)

    scalars = dict(
        verbosity=source.load("verbosity", DEFAULT_VERBOSITY),
        regrid_threshold=source.load("regrid_threshold", DEFAULT_REGRID_THRESHOLD),
        num_ghosts=source.load("num_ghosts", DEFAULT_NUM_GHOSTS),
        tag_buffer_size=source.load("tag_buffer_size", DEFAULT_TAG_BUFFER_SIZE),
        dt_multiplier=source.load("dt_multiplier", DEFAULT_DT_MULTIPLIER),
        fill_ratio=source.load("fill_ratio", DEFAULT_FILL_RATIO),
    )

    boundaries = resolve_boundary_conditions(
        source, len(evolution), space_dim=space_dim, var_names=evolution.names
    )
    extent = resolve_grid_extent(source, boundaries)
    domain = resolve_domain_length(source, extent)
    center = load_center(source, extent, domain, boundaries)

    scalars["ignore_checkpoint_name_mismatch"] = source.load(
        "ignore_checkpoint_name_mismatch", DEFAULT_IGNORE_CHECKPOINT_NAME_MISMATCH
    )

    max_level = source.load("max_level", DEFAULT_MAX_LEVEL)
    if max_level < 0:
        raise InvalidParameterError(f"max_level must be >= 0, got {max_level}", keys=["max_level"])
    # Not configurable: every level refines by REFINEMENT_RATIO
    ref_ratios = (REFINEMENT_RATIO,) * (max_level + 1)
    regrid_interval = source.load_array("regrid_interval", int, count=max_level + 1)

    scalars.update(
        checkpoint_interval=source.load("checkpoint_interval", DEFAULT_CHECKPOINT_INTERVAL),
        checkpoint_prefix=source.load("chk_prefix", dtype=str),
        plot_interval=source.load("plot_interval", DEFAULT_PLOT_INTERVAL),
        plot_prefix=source.load("plot_prefix", dtype=str),
        stop_time=source.load("stop_time", DEFAULT_STOP_TIME),
        max_steps=source.load("max_steps", DEFAULT_MAX_STEPS),
        write_plot_ghosts=source.load("write_plot_ghosts", DEFAULT_WRITE_PLOT_GHOSTS),
    )

    plot_vars = resolve_plot_vars(source, evolution, diagnostic)
    box_partitioning = resolve_box_partitioning(source)

    config = GridConfiguration(
        boundaries=boundaries,
        extent=extent,
        domain=domain,
        center=center,
        regrid_interval=tuple(regrid_interval),
        ref_ratios=ref_ratios,
        max_level=max_level,
        plot_vars=plot_vars,
        box_partitioning=box_partitioning,
        **scalars,
    )
    logger.debug(
        f"Grid configuration resolved: N = {extent.num_cells.tolist()}, "
        f"L = {domain.L}, {config.num_plot_vars} plot variable(s)"
    )
    return config


def create_grid_configuration(
    params: Mapping[str, Any],
    evolution_vars: VariableNames,
    diagnostic_vars: Optional[VariableNames] = None,
    space_dim: int = SPACE_DIM,
) -> GridConfiguration:
    """Build a configuration straight from a plain mapping of parameters.

    Example:
        >>> config = create_grid_configuration(
        ...     {"N": 16, "regrid_interval": [1], "chk_prefix": "chk_", "plot_prefix": "plt_"},
        ...     evolution_vars=["phi", "Pi"],
        ... )
        >>> config.coarsest_dx
        0.0625
    """
    return build_grid_configuration(
        ParameterSource(params), evolution_vars, diagnostic_vars, space_dim=space_dim
    )

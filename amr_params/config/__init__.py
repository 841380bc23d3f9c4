"""Configuration Module - Grid Parameter Resolution

This module turns a flat set of user parameters into one immutable
GridConfiguration for a block-structured AMR run.

Recommended Usage:
    from amr_params.config import ParameterSource, build_grid_configuration

    source = ParameterSource.from_yaml("params.yaml")
    config = build_grid_configuration(
        source,
        evolution_vars=["chi", "h11", "K"],
        diagnostic_vars=["Ham", "Mom"],
    )
    config.coarsest_dx, config.center, config.plot_vars

    # Or from a plain mapping
    from amr_params.config import create_grid_configuration
    config = create_grid_configuration(
        {"N_full": 64, "L_full": 16.0, "regrid_interval": [1],
         "chk_prefix": "chk_", "plot_prefix": "plt_"},
        evolution_vars=["phi", "Pi"],
    )

Import Policy:
    DO NOT use: from amr_params.config import *
    This causes namespace pollution and makes tracking difficult.

Submodules:
    defaults: Default values (SSOT)
    enums: BoundaryType, Parity, VariableType, ErrorCode
    parameter_source: ParameterSource (typed key/value lookup, file loaders)
    boundaries: Boundary condition resolution
    grid_extent: Cell count resolution (N, N_full, N{i}, N{i}_full)
    domain: Domain length, coarsest dx and grid center
    plot_vars: Plot variable name resolution
    box_partitioning: Max/min box sizes
    grid_config: GridConfiguration
    builder: Orchestration (build_grid_configuration)
    validation: Error types and soft safety checks
"""

from amr_params.config.enums import BoundaryType, ErrorCode, Parity, VariableType
# Error types first (no dependencies on resolvers)
from amr_params.config.validation import (
    ConfigurationError,
    ConfigurationWarning,
    ConflictingParametersError,
    InvalidParameterError,
    MissingParameterError,
    warn_if_unsafe,
)
from amr_params.config.parameter_source import ParameterSource
from amr_params.config.boundaries import (
    BoundaryAxisSpec,
    BoundaryParams,
    resolve_boundary_conditions,
    write_boundary_conditions,
)
from amr_params.config.grid_extent import GridExtent, resolve_grid_extent
from amr_params.config.domain import (
    DomainLength,
    default_center,
    full_domain_length,
    resolve_center,
    resolve_domain_length,
)
from amr_params.config.plot_vars import (
    PlotVariable,
    VariableTable,
    resolve_plot_vars,
    resolve_variable,
)
from amr_params.config.box_partitioning import BoxPartitioning, resolve_box_partitioning
from amr_params.config.grid_config import GridConfiguration
from amr_params.config.builder import build_grid_configuration, create_grid_configuration


__all__ = [
    # Enums
    "BoundaryType",
    "Parity",
    "VariableType",
    "ErrorCode",
    # Errors and warnings
    "ConfigurationError",
    "MissingParameterError",
    "ConflictingParametersError",
    "InvalidParameterError",
    "ConfigurationWarning",
    "warn_if_unsafe",
    # Parameter source
    "ParameterSource",
    # Resolved values
    "BoundaryAxisSpec",
    "BoundaryParams",
    "GridExtent",
    "DomainLength",
    "PlotVariable",
    "VariableTable",
    "BoxPartitioning",
    "GridConfiguration",
    # Resolvers
    "resolve_boundary_conditions",
    "write_boundary_conditions",
    "resolve_grid_extent",
    "resolve_domain_length",
    "full_domain_length",
    "default_center",
    "resolve_center",
    "resolve_variable",
    "resolve_plot_vars",
    "resolve_box_partitioning",
    # Factory functions
    "build_grid_configuration",
    "create_grid_configuration",
]

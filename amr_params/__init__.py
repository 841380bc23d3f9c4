"""Grid Parameter Resolution for Block-Structured AMR

Resolves a flat set of key/value parameters into a consistent, fully
populated grid configuration: cell counts, physical extent, boundary
conditions, center, plot-variable selection and box-partitioning limits.

Key Principles:
- Redundant inputs (aggregate vs per-axis, full vs half domain) are checked
  for conflicts at configuration time, not deep inside the run
- Resolution is a strict pipeline; the first invalid parameter aborts it
- The result is immutable and shared read-only by the AMR driver
- The refinement ratio is fixed to 2 on every level

Version: 1.0
"""

__version__ = "1.0"

from amr_params.config import (
    BoundaryType,
    ConfigurationError,
    ConflictingParametersError,
    GridConfiguration,
    InvalidParameterError,
    MissingParameterError,
    ParameterSource,
    Parity,
    PlotVariable,
    VariableTable,
    VariableType,
    build_grid_configuration,
    create_grid_configuration,
    warn_if_unsafe,
)

__all__ = [
    # Version
    "__version__",
    # Entry points
    "ParameterSource",
    "build_grid_configuration",
    "create_grid_configuration",
    "GridConfiguration",
    # Variables
    "VariableTable",
    "VariableType",
    "PlotVariable",
    # Boundaries
    "BoundaryType",
    "Parity",
    # Errors
    "ConfigurationError",
    "MissingParameterError",
    "ConflictingParametersError",
    "InvalidParameterError",
    "warn_if_unsafe",
]

"""
Default Parameter Values for AMR Grid Configuration

This module contains ALL default values used when resolving a grid configuration.
This is the Single Source of Truth (SSOT) for default parameters.

IMPORTANT Import Policies:
    1. DO NOT use: from amr_params.config.defaults import *
       This causes namespace pollution and makes tracking difficult.

    2. DO use explicit imports:
       from amr_params.config.defaults import DEFAULT_L, DEFAULT_MAX_BOX_SIZE

    3. DO NOT define defaults elsewhere. All defaults must be in this file.

Rationale:
    The resolvers read the same keys from different places (aggregate vs per-axis,
    new vs legacy names). Keeping the fallbacks here stops them drifting apart.
"""

# =============================================================================
# Dimensionality
# =============================================================================

# Number of spatial dimensions of the mesh
SPACE_DIM = 3

# =============================================================================
# General Defaults
# =============================================================================

# Console verbosity of the AMR driver (0 = quiet)
DEFAULT_VERBOSITY = 0

# =============================================================================
# Grid Setup Defaults
# =============================================================================

# Threshold above which a cell is tagged for refinement
DEFAULT_REGRID_THRESHOLD = 0.5

# Number of ghost cells around each box
# Note: must be at least 3 for 6th order Kreiss-Oliger dissipation
DEFAULT_NUM_GHOSTS = 3
MIN_SAFE_NUM_GHOSTS = 3

# Number of cells the tagged region is grown by
DEFAULT_TAG_BUFFER_SIZE = 3

# Courant factor: dt = dt_multiplier * dx
DEFAULT_DT_MULTIPLIER = 0.25

# Fraction of tagged cells a box must contain (how fussy regridding is)
DEFAULT_FILL_RATIO = 0.7

# =============================================================================
# Boundary Defaults
# =============================================================================

# Every axis is periodic unless stated otherwise
DEFAULT_IS_PERIODIC = True

# Default boundary kind on every side (see enums.BoundaryType.STATIC)
DEFAULT_BOUNDARY_KIND = 0

# Default parity of every variable under reflection (see enums.Parity.EVEN)
DEFAULT_PARITY = 0

# Default far-field value of every variable
DEFAULT_ASYMPTOTIC_VALUE = 0.0

# =============================================================================
# Domain Defaults
# =============================================================================

# Physical length of the longest side of the box
DEFAULT_L = 1.0

# =============================================================================
# Refinement Defaults
# =============================================================================

# Number of refinement levels above the coarsest (0 = unigrid)
DEFAULT_MAX_LEVEL = 0

# Refinement ratio between consecutive levels.
# CONSTANT: not read from parameters. Other ratios are untested, so every
# level uses this value regardless of what the parameter file says.
REFINEMENT_RATIO = 2

# =============================================================================
# Output and Stepping Defaults
# =============================================================================

DEFAULT_IGNORE_CHECKPOINT_NAME_MISMATCH = False
DEFAULT_CHECKPOINT_INTERVAL = 1
DEFAULT_PLOT_INTERVAL = 0
DEFAULT_STOP_TIME = 1.0
DEFAULT_MAX_STEPS = 1000000
DEFAULT_WRITE_PLOT_GHOSTS = False
DEFAULT_NUM_PLOT_VARS = 0

# Placeholder for plot variable names missing from a short plot_vars array
DEFAULT_PLOT_VAR_NAME = ""

# =============================================================================
# Box Partitioning Defaults
# =============================================================================

# Maximum box size (Chombo name max_grid_size, alias max_box_size)
DEFAULT_MAX_BOX_SIZE = 64

# Minimum box size (Chombo name block_factor, alias min_box_size)
DEFAULT_BLOCK_FACTOR = 8

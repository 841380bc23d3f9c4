"""Grid Configuration - Single Source of Truth (SSOT)

This module provides the finished, immutable configuration handed to the AMR
driver, the physics layer and the I/O layer. ALL grid parameters flow through
this class; it is built once by amr_params.config.builder and never modified.

Import Policy:
    from amr_params.config.grid_config import GridConfiguration

DO NOT use: from amr_params.config.grid_config import *
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Tuple

import numpy as np

from amr_params.config.boundaries import BoundaryParams
from amr_params.config.box_partitioning import BoxPartitioning
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
)
from amr_params.config.domain import DomainLength
from amr_params.config.grid_extent import GridExtent
from amr_params.config.plot_vars import PlotVariable


@dataclass(frozen=True, eq=False)
class GridConfiguration:
    """Complete grid configuration (SSOT).

    Attributes:
        boundaries: Periodicity, boundary kinds, parities and far-field values
        extent: Half- and full-domain cell counts of the coarsest level
        domain: Physical length, coarsest dx and origin
        center: Grid center, on the symmetry plane for reflective axes
        checkpoint_prefix, plot_prefix: Required file name prefixes
        regrid_interval: Steps between regrids, one entry per level
        ref_ratios: Refinement ratio per level. Always 2 on every level: this
            is a fixed constant, not a parameter (other ratios are untested)
        plot_vars: Resolved (identifier, kind) pairs to write to plot files
        box_partitioning: Maximum and minimum box sizes

    The remaining attributes are the scalar scheduling/output parameters of
    the same names in the parameter file.
    """

    boundaries: BoundaryParams
    extent: GridExtent
    domain: DomainLength
    center: np.ndarray
    checkpoint_prefix: str
    plot_prefix: str
    regrid_interval: Tuple[int, ...]
    ref_ratios: Tuple[int, ...]
    plot_vars: Tuple[PlotVariable, ...] = ()
    box_partitioning: BoxPartitioning = field(default_factory=BoxPartitioning)

    verbosity: int = DEFAULT_VERBOSITY
    regrid_threshold: float = DEFAULT_REGRID_THRESHOLD
    num_ghosts: int = DEFAULT_NUM_GHOSTS
    tag_buffer_size: int = DEFAULT_TAG_BUFFER_SIZE
    dt_multiplier: float = DEFAULT_DT_MULTIPLIER
    fill_ratio: float = DEFAULT_FILL_RATIO
    ignore_checkpoint_name_mismatch: bool = DEFAULT_IGNORE_CHECKPOINT_NAME_MISMATCH
    max_level: int = DEFAULT_MAX_LEVEL
    checkpoint_interval: int = DEFAULT_CHECKPOINT_INTERVAL
    plot_interval: int = DEFAULT_PLOT_INTERVAL
    stop_time: float = DEFAULT_STOP_TIME
    max_steps: int = DEFAULT_MAX_STEPS
    write_plot_ghosts: bool = DEFAULT_WRITE_PLOT_GHOSTS

    # Shortcuts used by the AMR driver

    @property
    def num_plot_vars(self) -> int:
        """Number of plot variables that actually resolved."""
        return len(self.plot_vars)

    @property
    def L(self) -> float:
        return self.domain.L

    @property
    def coarsest_dx(self) -> float:
        return self.domain.coarsest_dx

    @property
    def dx(self) -> np.ndarray:
        return self.domain.dx

    @property
    def origin(self) -> np.ndarray:
        return self.domain.origin

    @property
    def ivN(self) -> np.ndarray:
        return self.extent.ivN

    @property
    def is_periodic(self) -> Tuple[bool, ...]:
        return self.boundaries.is_periodic

    @property
    def nonperiodic_boundaries_exist(self) -> bool:
        return self.boundaries.nonperiodic_boundaries_exist

    @property
    def symmetric_boundaries_exist(self) -> bool:
        return self.boundaries.symmetric_boundaries_exist

    @property
    def max_grid_size(self) -> int:
        return self.box_partitioning.max_box_size

    @property
    def block_factor(self) -> int:
        return self.box_partitioning.block_factor

    def to_dict(self) -> dict:
        """Convert configuration to a plain dictionary for serialization.

        Enums become their names, numpy arrays become lists and nested
        dataclasses become dictionaries.

        Returns:
            Dictionary representation of configuration
        """

        def convert(obj):
            if isinstance(obj, Enum):
                return obj.name
            if isinstance(obj, np.ndarray):
                return obj.tolist()
            if isinstance(obj, np.generic):
                return obj.item()
            if isinstance(obj, PlotVariable):
                return {"index": obj.index, "var_type": obj.var_type.name}
            if isinstance(obj, (list, tuple)):
                return [convert(item) for item in obj]
            if hasattr(obj, "__dataclass_fields__"):
                return {f.name: convert(getattr(obj, f.name)) for f in fields(obj)}
            return obj

        config_dict = convert(self)
        config_dict["num_plot_vars"] = self.num_plot_vars
        config_dict["extent"]["max_N"] = self.extent.max_N
        config_dict["extent"]["max_N_full"] = self.extent.max_N_full
        return config_dict

"""Box partitioning limits.

Chombo calls the maximum box size max_grid_size and the minimum box size
block_factor. Both are also accepted under the more descriptive names
max_box_size and min_box_size; the Chombo name wins when both are given.
"""

from dataclasses import dataclass

from amr_params.config.defaults import DEFAULT_BLOCK_FACTOR, DEFAULT_MAX_BOX_SIZE
from amr_params.config.parameter_source import ParameterSource


@dataclass(frozen=True)
class BoxPartitioning:
    """Limits used when the mesh is split into boxes.

    Attributes:
        max_box_size: Largest box edge, in cells
        block_factor: Smallest box edge, in cells (every box is a multiple)
    """
    max_box_size: int = DEFAULT_MAX_BOX_SIZE
    block_factor: int = DEFAULT_BLOCK_FACTOR


def _load_aliased(source: ParameterSource, key: str, alias: str, default: int) -> int:
    if source.contains(key):
        return source.load(key, dtype=int)
    return source.load(alias, default)


def resolve_box_partitioning(source: ParameterSource) -> BoxPartitioning:
    """Resolve box limits; the AMR engine does any cross-checking itself."""
    return BoxPartitioning(
        max_box_size=_load_aliased(source, "max_grid_size", "max_box_size", DEFAULT_MAX_BOX_SIZE),
        block_factor=_load_aliased(source, "block_factor", "min_box_size", DEFAULT_BLOCK_FACTOR),
    )

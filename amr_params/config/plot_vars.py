"""Plot variable selection.

Plot variables are given by name and resolved against the evolution-variable
table first, then the diagnostic-variable table. Names found in neither are
reported and dropped; this never aborts configuration.

Usage:
    evolution = VariableTable(["chi", "h11", "K"], VariableType.EVOLUTION)
    diagnostic = VariableTable(["Ham", "Mom"], VariableType.DIAGNOSTIC)
    plot_vars = resolve_plot_vars(source, evolution, diagnostic)
"""

import logging
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from amr_params.config.defaults import DEFAULT_NUM_PLOT_VARS, DEFAULT_PLOT_VAR_NAME
from amr_params.config.enums import VariableType
from amr_params.config.parameter_source import ParameterSource
from amr_params.config.validation import InvalidParameterError

logger = logging.getLogger(__name__)


class PlotVariable(NamedTuple):
    """A variable selected for plot output."""
    index: int
    var_type: VariableType


class VariableTable:
    """Name enumeration of one kind of variable.

    The position of a name in `names` is its identifier.
    """

    def __init__(self, names: Iterable[str], var_type: VariableType):
        self.names: Tuple[str, ...] = tuple(names)
        self.var_type = var_type
        self._index = {name: i for i, name in enumerate(self.names)}
        if len(self._index) != len(self.names):
            raise ValueError(f"Duplicate names in {var_type.value} variable table")

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __repr__(self) -> str:
        return f"VariableTable({list(self.names)!r}, {self.var_type})"

    def name_to_index(self, name: str) -> Optional[int]:
        """Return the identifier of `name`, or None if it is not in the table."""
        return self._index.get(name)

    def name_of(self, index: int) -> str:
        return self.names[index]


def resolve_variable(name: str, tables: Sequence[VariableTable]) -> Optional[PlotVariable]:
    """Look `name` up in each table in order; None if no table knows it."""
    for table in tables:
        index = table.name_to_index(name)
        if index is not None:
            return PlotVariable(index, table.var_type)
    return None


def resolve_plot_vars(
    source: ParameterSource,
    evolution: VariableTable,
    diagnostic: Optional[VariableTable] = None,
) -> Tuple[PlotVariable, ...]:
    """Read num_plot_vars / plot_vars and resolve each name.

    Missing entries of a short plot_vars array count as empty names and are
    dropped like any other unknown name.

    Returns:
        Resolved variables in input order; may be shorter than num_plot_vars
    """
    num_plot_vars = source.load("num_plot_vars", DEFAULT_NUM_PLOT_VARS)
    if num_plot_vars < 0:
        raise InvalidParameterError(
            f"num_plot_vars must be >= 0, got {num_plot_vars}", keys=["num_plot_vars"]
        )

    names = source.load_array(
        "plot_vars", str, count=num_plot_vars, default=DEFAULT_PLOT_VAR_NAME
    )
    tables = [evolution] if diagnostic is None else [evolution, diagnostic]

    plot_vars: List[PlotVariable] = []
    for name in names:
        var = resolve_variable(name, tables)
        if var is None:
            logger.warning(f"Variable with name {name!r} not found.")
            continue
        plot_vars.append(var)
    return tuple(plot_vars)

"""
Configuration Validation Utilities

This module provides the error types raised by the resolvers and the soft
safety checks run on a finished configuration.

Import Policy:
    from amr_params.config.validation import ConfigurationError, warn_if_unsafe

DO NOT use: from amr_params.config.validation import *
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

from amr_params.config.defaults import MIN_SAFE_NUM_GHOSTS
from amr_params.config.enums import ErrorCode

if TYPE_CHECKING:
    from amr_params.config.grid_config import GridConfiguration


class ConfigurationError(Exception):
    """Raised when a parameter set cannot be resolved into a configuration.

    Attributes:
        code: Which constraint was violated
        keys: Parameter keys involved in the violation
    """

    code: ErrorCode = ErrorCode.INVALID_VALUE

    def __init__(
        self,
        message: str,
        keys: Iterable[str] = (),
        code: Optional[ErrorCode] = None,
    ):
        super().__init__(message)
        self.keys: Tuple[str, ...] = tuple(keys)
        if code is not None:
            self.code = code

    def __str__(self) -> str:
        message = super().__str__()
        if self.keys:
            return f"[{self.code.value}] {message} (keys: {', '.join(self.keys)})"
        return f"[{self.code.value}] {message}"


class MissingParameterError(ConfigurationError):
    """A required key was not supplied and has no default."""

    code = ErrorCode.MISSING_REQUIRED_PARAMETER


class ConflictingParametersError(ConfigurationError):
    """Mutually exclusive keys were supplied together."""

    code = ErrorCode.CONFLICTING_PARAMETERS


class InvalidParameterError(ConfigurationError):
    """A supplied value is out of range or cannot be interpreted."""

    code = ErrorCode.INVALID_VALUE


class ConfigurationWarning(Warning):
    """Warning for legal but potentially unsafe configuration choices."""

    pass


def warn_if_unsafe(config: GridConfiguration) -> List[str]:
    """Check for potentially unsafe configuration choices.

    These are not errors, but choices that may lead to:
    - Unstable evolution
    - Empty or pointless output
    - Regridding that never triggers

    Warnings are issued via Python's warnings module.

    Args:
        config: Finished GridConfiguration to check

    Returns:
        List of warning messages (empty if no warnings)
    """
    warnings_list = []

    # Check 1: Too few ghost cells for the dissipation stencil
    if config.num_ghosts < MIN_SAFE_NUM_GHOSTS:
        warnings_list.append(
            f"num_ghosts ({config.num_ghosts}) is below {MIN_SAFE_NUM_GHOSTS}. "
            "Kreiss-Oliger dissipation needs at least 3 ghost cells."
        )

    # Check 2: Fill ratio outside the meaningful range
    if not 0.0 < config.fill_ratio <= 1.0:
        warnings_list.append(
            f"fill_ratio ({config.fill_ratio}) should be in (0, 1]. "
            "Regridding will not behave as expected."
        )

    # Check 3: Courant factor too large
    if config.dt_multiplier > 1.0:
        warnings_list.append(
            f"dt_multiplier ({config.dt_multiplier}) is above 1. "
            "Explicit time stepping is likely to be unstable."
        )

    # Check 4: Plot files requested but nothing to write
    if config.plot_interval > 0 and config.num_plot_vars == 0:
        warnings_list.append(
            f"plot_interval is {config.plot_interval} but no plot variables were resolved. "
            "Plot files will contain no data."
        )

    for warning_msg in warnings_list:
        warnings.warn(warning_msg, ConfigurationWarning, stacklevel=2)

    return warnings_list

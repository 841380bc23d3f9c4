"""
Configuration Enums for AMR Grid Parameters

This module defines all enumeration types used throughout grid configuration.
These enums provide type-safe configuration options and improve code documentation.

Import Policy:
    from amr_params.config.enums import BoundaryType, Parity, VariableType, ErrorCode

DO NOT use: from amr_params.config.enums import *
"""

from enum import Enum, IntEnum


def _parse_int_enum(enum_cls, value):
    """Accept a member, an integer code, a numeric string or a case-insensitive name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, bool):
        raise TypeError(f"not a {enum_cls.__name__}: {value!r}")
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("-").isdigit():
            return enum_cls(int(text))
        return enum_cls[text.upper()]
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"not a {enum_cls.__name__} code: {value!r}")
    return enum_cls(int(value))


class BoundaryType(IntEnum):
    """Boundary kinds selectable through lo_boundary / hi_boundary.

    The integer values are the ones written in parameter files.

    Options:
        STATIC: Boundary cells keep their initial values
        SOMMERFELD: Outgoing-wave condition towards an asymptotic value
        REFLECTIVE: Mirror symmetry across the boundary (needs vars_parity)
        EXTRAPOLATING: Values extrapolated from the interior
        MIXED: Per-variable mix of Sommerfeld and extrapolating conditions

    Note:
        Only SOMMERFELD requires vars_asymptotic_values. MIXED sides keep the
        zero far-field defaults.
    """
    STATIC = 0
    SOMMERFELD = 1
    REFLECTIVE = 2
    EXTRAPOLATING = 3
    MIXED = 4

    @property
    def is_reflective(self) -> bool:
        return self is BoundaryType.REFLECTIVE

    @property
    def is_asymptotic(self) -> bool:
        """True for kinds that need an asymptotic value per variable."""
        return self is BoundaryType.SOMMERFELD

    @property
    def label(self) -> str:
        return self.name.capitalize() + " bc"

    @classmethod
    def parse(cls, value) -> "BoundaryType":
        return _parse_int_enum(cls, value)


class Parity(IntEnum):
    """Parity of a variable under reflection through a symmetry plane.

    ODD_<axes> means the variable changes sign when reflected across a plane
    normal to any of the listed axes, and keeps its sign otherwise.
    """
    EVEN = 0
    ODD_X = 1
    ODD_Y = 2
    ODD_Z = 3
    ODD_XY = 4
    ODD_YZ = 5
    ODD_XZ = 6
    ODD_XYZ = 7

    def sign(self, direction: int) -> int:
        """Return +1 or -1, the factor applied when reflecting across `direction`."""
        axis = "XYZ"[direction]
        if self is Parity.EVEN:
            return 1
        odd_axes = self.name.split("_", 1)[1]
        return -1 if axis in odd_axes else 1

    @classmethod
    def parse(cls, value) -> "Parity":
        return _parse_int_enum(cls, value)


class VariableType(Enum):
    """Which name table a plot variable was resolved against.

    Options:
        EVOLUTION: A variable evolved by the equations of motion
        DIAGNOSTIC: A derived quantity computed for output/tagging only
    """
    EVOLUTION = "evolution"
    DIAGNOSTIC = "diagnostic"


class ErrorCode(Enum):
    """Reason a parameter set was rejected.

    Options:
        MISSING_REQUIRED_PARAMETER: A key with no default was not supplied
        CONFLICTING_PARAMETERS: Mutually exclusive keys were supplied together
        INVALID_VALUE: A key was supplied but its value is unusable
    """
    MISSING_REQUIRED_PARAMETER = "missing_required_parameter"
    CONFLICTING_PARAMETERS = "conflicting_parameters"
    INVALID_VALUE = "invalid_value"

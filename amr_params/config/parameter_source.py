"""Parameter Source

Read-only key/value store the resolvers pull parameters from. It has no
dependencies on other resolver modules to avoid circular imports.

Usage:
    from amr_params.config.parameter_source import ParameterSource

    source = ParameterSource.from_yaml("params.yaml")
    num_ghosts = source.load("num_ghosts", 3)
    is_periodic = source.load("isPeriodic", [True, True, True])
    regrid_interval = source.load_array("regrid_interval", int, count=max_level + 1)
"""

from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any, Iterator, List, Mapping, Optional

import yaml

from amr_params.config.validation import InvalidParameterError, MissingParameterError

# Sentinel for "no default given"
_MISSING = object()

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off"}


def _coerce_scalar(key: str, value: Any, dtype: type) -> Any:
    """Convert a single stored value to `dtype`."""
    if isinstance(value, (list, tuple)):
        if len(value) != 1:
            raise InvalidParameterError(
                f"Expected a single value for '{key}', got {len(value)} values",
                keys=[key],
            )
        value = value[0]

    try:
        if dtype is bool:
            if isinstance(value, bool):
                return value
            if isinstance(value, int) and value in (0, 1):
                return bool(value)
            if isinstance(value, str):
                lowered = value.strip().lower()
                if lowered in _TRUE_STRINGS:
                    return True
                if lowered in _FALSE_STRINGS:
                    return False
            raise ValueError(f"not a boolean: {value!r}")
        if dtype is int:
            if isinstance(value, bool):
                raise ValueError(f"not an integer: {value!r}")
            if isinstance(value, float):
                if not value.is_integer():
                    raise ValueError(f"not an integer: {value!r}")
                return int(value)
            return int(value)
        if dtype is float:
            if isinstance(value, bool):
                raise ValueError(f"not a number: {value!r}")
            return float(value)
        if dtype is str:
            return str(value)
        return dtype(value)
    except (ValueError, TypeError, KeyError) as e:
        # Enum parsers are passed as bound classmethods; report the enum name
        target = getattr(dtype, "__self__", dtype)
        raise InvalidParameterError(
            f"Cannot interpret '{key}' = {value!r} as {getattr(target, '__name__', target)}: {e}",
            keys=[key],
        ) from e


def _as_sequence(value: Any) -> List[Any]:
    """Stored arrays may be lists, whitespace-separated strings or bare scalars."""
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        return value.split()
    return [value]


class ParameterSource:
    """Read-only, case-sensitive key/value store with typed retrieval.

    Args:
        params: Flat mapping of parameter names to values. Values may be
            scalars, strings, or lists of scalars. The mapping is copied.
    """

    def __init__(self, params: Optional[Mapping[str, Any]] = None):
        self._params = dict(params or {})

    def contains(self, key: str) -> bool:
        """Return True if `key` was supplied."""
        return key in self._params

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __iter__(self) -> Iterator[str]:
        return iter(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __repr__(self) -> str:
        return f"ParameterSource({len(self._params)} parameters)"

    def load(self, key: str, default: Any = _MISSING, dtype: Optional[type] = None) -> Any:
        """Load `key`, coerced to `dtype` or to the type of `default`.

        A list default turns this into an array load of exactly len(default)
        elements, each coerced to the type of the first default element.

        Args:
            key: Parameter name (exact match)
            default: Value returned when `key` is absent. If omitted, the key
                is required.
            dtype: Target type. Inferred from `default` when not given.

        Returns:
            The coerced value, or `default` when the key is absent

        Raises:
            MissingParameterError: If the key is absent and no default was given
            InvalidParameterError: If the stored value cannot be coerced
        """
        if isinstance(default, (list, tuple)):
            element_type = dtype or (type(default[0]) if default else None)
            if key not in self._params:
                return list(default)
            return self.load_array(key, element_type, count=len(default))

        if key not in self._params:
            if default is _MISSING:
                raise MissingParameterError(
                    f"Required parameter '{key}' was not supplied", keys=[key]
                )
            return default

        if dtype is None and default is not _MISSING and default is not None:
            dtype = type(default)
        value = self._params[key]
        if dtype is None:
            return value
        return _coerce_scalar(key, value, dtype)

    def load_array(
        self,
        key: str,
        dtype: Optional[type],
        start: int = 0,
        count: Optional[int] = None,
        default: Any = _MISSING,
    ) -> List[Any]:
        """Load `count` elements of the array stored under `key`, from `start`.

        Args:
            key: Parameter name (exact match)
            dtype: Element type, or None to return elements unconverted
            start: Index of the first element to return
            count: Number of elements; all remaining elements if None
            default: Pad value used when the key is absent or the array is
                shorter than requested. If omitted, both cases are errors.

        Returns:
            List of coerced elements

        Raises:
            MissingParameterError: If the key is absent or too short and no
                default was given
            InvalidParameterError: If an element cannot be coerced
        """
        if key not in self._params:
            if default is _MISSING:
                raise MissingParameterError(
                    f"Required array parameter '{key}' was not supplied", keys=[key]
                )
            return [default] * (count or 0)

        values = _as_sequence(self._params[key])
        if count is None:
            count = max(len(values) - start, 0)
        selected = values[start:start + count]

        if len(selected) < count:
            if default is _MISSING:
                raise MissingParameterError(
                    f"Array parameter '{key}' needs {count} entries from index {start}, "
                    f"only {len(selected)} supplied",
                    keys=[key],
                )
            selected = selected + [default] * (count - len(selected))

        if dtype is None:
            return selected
        return [_coerce_scalar(key, value, dtype) for value in selected]

    def as_dict(self) -> dict:
        """Return a shallow copy of the stored parameters."""
        return dict(self._params)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ParameterSource":
        """Load a flat YAML mapping of parameters.

        Example file:
            N_full: 64
            L_full: 16.0
            isPeriodic: [false, true, true]
            plot_vars: [chi, Ham]

        Raises:
            InvalidParameterError: If the file is not a flat mapping
        """
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise InvalidParameterError(
                f"Parameter file {path} must contain a mapping, got {type(data).__name__}"
            )
        for key, value in data.items():
            if not isinstance(key, str):
                raise InvalidParameterError(
                    f"Parameter names must be strings, got {key!r} in {path}"
                )
            elements = value if isinstance(value, list) else [value]
            if any(isinstance(element, (dict, list)) for element in elements):
                raise InvalidParameterError(
                    f"Parameter '{key}' in {path} is nested; only scalars and flat lists are allowed",
                    keys=[key],
                )
        return cls(data)

    @classmethod
    def from_inputs_file(cls, path: str | Path) -> "ParameterSource":
        """Load a Chombo-style inputs file.

        Each non-blank line has the form ``key = value [value ...]``; text after
        ``#`` is a comment and double-quoted values may contain spaces. Single
        values are stored as strings, several values as a list of strings, and
        a repeated key keeps its last value.

        Raises:
            InvalidParameterError: If a line has no ``=`` or no key
        """
        path = Path(path)
        params = {}
        with open(path, encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                stripped = line.strip()
                if not stripped or stripped.startswith("#"):
                    continue
                key, sep, rest = stripped.partition("=")
                key = key.strip()
                if not sep:
                    raise InvalidParameterError(
                        f"{path}:{line_number}: expected 'key = value', got {stripped!r}"
                    )
                if not key or len(key.split()) != 1:
                    raise InvalidParameterError(
                        f"{path}:{line_number}: invalid parameter name {key!r}"
                    )
                try:
                    values = shlex.split(rest, comments=True)
                except ValueError as e:
                    raise InvalidParameterError(
                        f"{path}:{line_number}: cannot parse values for '{key}': {e}",
                        keys=[key],
                    ) from e
                params[key] = values[0] if len(values) == 1 else values
        return cls(params)

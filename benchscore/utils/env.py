"""Environment variable helpers with type coercion and logging.

Usage:
    from benchscore.utils.env import get_env

    min_duration = get_env("BENCHSCORE_MIN_DURATION", default=1.0, as_type=float)
    seed = get_env("BENCHSCORE_SEED", as_type=int)
    level = get_env("BENCHSCORE_LOG_LEVEL", default="WARNING")
"""

from __future__ import annotations

import os
from typing import Any, TypeVar, cast, overload

T = TypeVar("T")

_FALSE_VALUES = ("false", "0", "", "no", "off")


class EnvVarError(Exception):
    """Base exception for environment variable errors."""

    pass


class EnvVarTypeError(EnvVarError):
    """Raised when an environment variable cannot be converted to the expected type."""

    def __init__(self, name: str, value: str, expected_type: type) -> None:
        self.name = name
        self.value = value
        self.expected_type = expected_type
        super().__init__(f"Cannot convert {name}='{value}' to {expected_type.__name__}")


def _coerce_type(name: str, value: str, as_type: type) -> Any:
    """Convert a string value to the specified type.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if as_type is bool:
            return value.strip().lower() not in _FALSE_VALUES
        if as_type is int:
            return int(value)
        if as_type is float:
            return float(value)
        if as_type is str:
            return value

        # list[str] as comma-separated
        origin = getattr(as_type, "__origin__", None)
        if as_type is list or origin is list:
            return [item.strip() for item in value.split(",") if item.strip()]

        return as_type(value)

    except (ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


def _log_access(name: str, value: str | None) -> None:
    """Log environment variable access at DEBUG level."""
    from benchscore.utils.logger import Logger

    Logger.component("env").debug(f"ENV GET {name}={value}")


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, default: T, log: bool = ...) -> T:
    ...


@overload
def get_env(name: str, *, as_type: type[T], log: bool = ...) -> T | None:
    ...


@overload
def get_env(name: str, *, log: bool = ...) -> str | None:
    ...


def get_env(
    name: str,
    *,
    default: T | None = None,
    as_type: type[T] | None = None,
    log: bool = False,
) -> T | str | None:
    """Get an environment variable with optional type coercion.

    An unset or empty variable yields ``default``; an empty string is
    treated as "not configured" so that ``BENCHSCORE_SEED=`` falls back
    cleanly instead of failing int conversion.

    Args:
        name: Environment variable name.
        default: Value returned when the variable is unset or empty.
        as_type: Type to convert the value to. Supports bool, int, float,
            str, and list (comma-separated).
        log: If True, log the access at DEBUG level.

    Returns:
        The converted value, or default.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.

    Examples:
        >>> get_env("BENCHSCORE_MIN_ITERATIONS", default=32, as_type=int)
        32
    """
    value = os.environ.get(name)

    if log:
        _log_access(name, value)

    if value is None or value == "":
        return default

    if as_type is not None:
        return cast(T, _coerce_type(name, value, as_type))

    return value


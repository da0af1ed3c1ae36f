"""Environment variable lookup with optional conversion.

Usage:
    from arpiface.utils.env import get_env
    from arpiface.utils.logger import LogLevel

    level = get_env("ARPIFACE_LOG_LEVEL", default=LogLevel.WARNING, as_type=LogLevel)
    client_path = get_env("ARPIFACE_ARP_CLIENT")
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, TypeVar, cast, overload

from arpiface.utils.logger import Logger

T = TypeVar("T")


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


def _convert(name: str, value: str, as_type: type) -> Any:
    """Convert value to as_type.

    Enums match on value first, then case-insensitively on member name,
    so ARPIFACE_LOG_LEVEL=debug selects LogLevel.DEBUG.

    Raises:
        EnvVarTypeError: If conversion fails.
    """
    try:
        if issubclass(as_type, Enum):
            try:
                return as_type(value)
            except ValueError:
                return as_type[value.strip().upper()]
        return as_type(value)
    except (KeyError, ValueError, TypeError) as e:
        raise EnvVarTypeError(name, value, as_type) from e


@overload
def get_env(name: str, *, default: T, as_type: type[T], log: bool = ...) -> T:
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
    """Get an environment variable, converted to as_type if given.

    Args:
        name: Environment variable name.
        default: Returned when the variable is unset or empty.
        as_type: Callable type applied to the raw string. Enum types
            also accept member names in any case.
        log: If True, record the lookup at debug level.

    Raises:
        EnvVarTypeError: If as_type is specified and conversion fails.
    """
    value = os.environ.get(name)

    if log:
        Logger.debug("env", f"ENV GET {name}={value}")

    if not value:
        return default

    if as_type is not None:
        return cast(T, _convert(name, value, as_type))

    return value

"""arpiface utilities - logging and environment helpers."""

from arpiface.utils.env import (
    EnvVarError,
    EnvVarTypeError,
    get_env,
)
from arpiface.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "get_env",
    # Logger
    "LogLevel",
    "Logger",
    "LoggerNotConfiguredError",
]

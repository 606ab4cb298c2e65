"""benchscore utilities - logging and environment helpers."""

from benchscore.utils.env import EnvVarError, EnvVarTypeError, get_env
from benchscore.utils.logger import (
    Logger,
    LoggerNotConfiguredError,
    LogLevel,
)

__all__ = [
    # Env
    "EnvVarError",
    "EnvVarTypeError",
    "LogLevel",
    # Logger
    "Logger",
    "LoggerNotConfiguredError",
    "get_env",
]

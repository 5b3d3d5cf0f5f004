"""
RWR Launcher Common Utilities

Shared error types, decorators and logging setup.
"""

from .exceptions import (
    LaunchErrorKind, LauncherError, SteamLaunchError, SteamUnavailableError,
    GameUnavailableError, LaunchFailedError, ConfigError, InvalidConfigError,
)
from .decorators import handle_errors, timed
from .logging_config import setup_logging, JSONFormatter, LogContext

__all__ = [
    # Exceptions
    "LaunchErrorKind", "LauncherError", "SteamLaunchError",
    "SteamUnavailableError", "GameUnavailableError", "LaunchFailedError",
    "ConfigError", "InvalidConfigError",
    # Decorators
    "handle_errors", "timed",
    # Logging
    "setup_logging", "JSONFormatter", "LogContext",
]

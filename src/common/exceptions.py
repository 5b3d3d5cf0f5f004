"""
RWR Launcher Exception Hierarchy

Provides clear, actionable error messages with structured information
for logging, host serialization, and programmatic error handling.
"""

from enum import Enum
from typing import Optional, Dict, Any


class LaunchErrorKind(str, Enum):
    """Closed set of outcomes that may cross the host boundary."""
    STEAM_UNAVAILABLE = "steam_unavailable"
    GAME_UNAVAILABLE = "game_unavailable"
    LAUNCH_FAILED = "launch_failed"


class LauncherError(Exception):
    """
    Base exception for all launcher errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        details: Additional context as key-value pairs
        cause: Original exception that caused this error
        recoverable: Whether the error is recoverable
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recoverable: bool = True,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause
        self.recoverable = recoverable

    def __str__(self):
        s = f"[{self.code}] {self.message}"
        if self.details:
            s += f" (details: {self.details})"
        if self.cause:
            s += f" caused by: {self.cause}"
        return s

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
            "recoverable": self.recoverable,
        }


# =============================================================================
# Steam launch errors
# =============================================================================

class SteamLaunchError(LauncherError):
    """Base for the three launch outcome kinds."""

    kind: LaunchErrorKind

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
        recoverable: bool = True,
    ):
        super().__init__(
            message,
            code=self.kind.value,
            details=details,
            cause=cause,
            recoverable=recoverable,
        )


class SteamUnavailableError(SteamLaunchError):
    """Steam itself is absent or not registered for the steam:// scheme."""
    kind = LaunchErrorKind.STEAM_UNAVAILABLE

    def __init__(self, reason: str = "No Steam installation root found",
                 cause: Optional[Exception] = None):
        super().__init__(reason, cause=cause, recoverable=False)


class GameUnavailableError(SteamLaunchError):
    """Steam is present but the game's manifest was not found."""
    kind = LaunchErrorKind.GAME_UNAVAILABLE

    def __init__(self, app_id: int):
        super().__init__(
            f"App {app_id} is not installed in any Steam library",
            details={"app_id": app_id},
        )


class LaunchFailedError(SteamLaunchError):
    """Handing the launch URL to the URI opener failed."""
    kind = LaunchErrorKind.LAUNCH_FAILED

    def __init__(self, url: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to open {url}",
            details={"url": url},
            cause=cause,
        )


# =============================================================================
# Configuration errors
# =============================================================================

class ConfigError(LauncherError):
    """Base for configuration errors."""
    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration."""
    def __init__(self, field: str, value: Any, reason: str):
        super().__init__(
            f"Invalid configuration: {field}={value}: {reason}",
            code="INVALID_CONFIG",
            details={"field": field, "value": str(value), "reason": reason},
        )

"""
RWR Steam Launch

Detects a Steam installation of Running with Rifles and launches it
through the ``steam://`` URI scheme.
"""

from .availability import Availability, AvailabilityChecker
from .commands import (
    check_availability, error_code, launch,
    steam_check_rwr_available, steam_launch_rwr,
)
from .constants import RWR_APP_ID
from .dispatcher import LaunchDispatcher
from .launch_args import KNOWN_BOOL_PARAMS, build_launch_args_text
from .launch_url import build_launch_url, percent_encode
from .settings import LaunchSettings, SettingsStore

__all__ = [
    "Availability",
    "AvailabilityChecker",
    "check_availability",
    "error_code",
    "launch",
    "steam_check_rwr_available",
    "steam_launch_rwr",
    "RWR_APP_ID",
    "LaunchDispatcher",
    "KNOWN_BOOL_PARAMS",
    "build_launch_args_text",
    "build_launch_url",
    "percent_encode",
    "LaunchSettings",
    "SettingsStore",
]

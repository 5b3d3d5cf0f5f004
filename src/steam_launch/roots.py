"""
Steam root location.

Enumerates the directories where the Steam client is conventionally
installed on the current operating system.  Only environment variables
and the user's home directory are consulted; nothing here touches the
filesystem.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Mapping, Optional

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

#: Steam root relative to the home directory on macOS.
_MACOS_STEAM_PATH = Path("Library/Application Support/Steam")

#: Modern and legacy Steam roots relative to the home directory on Linux.
_LINUX_STEAM_PATHS: List[Path] = [
    Path(".local/share/Steam"),
    Path(".steam/steam"),
]

#: "Program Files" style variables consulted on Windows (32-bit, 64-bit).
_WINDOWS_PROGRAM_FILES_VARS = ("PROGRAMFILES(X86)", "PROGRAMFILES")


def normalize_paths(paths: Iterable[Path]) -> List[Path]:
    """Deduplicate *paths* and return them in sorted order."""
    return sorted(set(paths))


def _home(environ: Mapping[str, str]) -> Optional[Path]:
    home = environ.get("HOME")
    if home:
        return Path(home)
    try:
        return Path.home()
    except RuntimeError:
        return None


# ---------------------------------------------------------------------------
# Per-platform strategies
# ---------------------------------------------------------------------------

def _macos_roots(environ: Mapping[str, str]) -> List[Path]:
    home = _home(environ)
    if home is None:
        return []
    return [home / _MACOS_STEAM_PATH]


def _linux_roots(environ: Mapping[str, str]) -> List[Path]:
    home = _home(environ)
    if home is None:
        return []
    return [home / rel for rel in _LINUX_STEAM_PATHS]


def _windows_roots(environ: Mapping[str, str]) -> List[Path]:
    roots: List[Path] = []
    for var in _WINDOWS_PROGRAM_FILES_VARS:
        value = environ.get(var)
        if value:
            roots.append(Path(value) / "Steam")
        else:
            logger.debug("%s is not set; skipping", var)
    return roots


_STRATEGIES: Dict[str, Callable[[Mapping[str, str]], List[Path]]] = {
    "darwin": _macos_roots,
    "linux": _linux_roots,
    "win32": _windows_roots,
}


def platform_family(platform: Optional[str] = None) -> str:
    """Map a ``sys.platform`` value onto one of the strategy keys.

    Unknown platforms are returned unchanged and select no strategy.
    """
    platform = platform or sys.platform
    if platform.startswith("linux"):
        return "linux"
    if platform in ("win32", "cygwin"):
        return "win32"
    return platform


def candidate_steam_roots(
    platform: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> List[Path]:
    """Return plausible Steam installation roots for *platform*.

    Args:
        platform: A ``sys.platform`` style identifier.  Defaults to the
                  running interpreter's platform.
        environ: Environment mapping to read.  Defaults to
                 :data:`os.environ`.

    Returns:
        A deduplicated, sorted list of candidate roots.  An empty list
        means no rule matched, which callers treat as "Steam is not
        available on this machine".
    """
    family = platform_family(platform)
    if environ is None:
        environ = os.environ

    strategy = _STRATEGIES.get(family)
    if strategy is None:
        logger.info("No Steam root rules for platform %r", family)
        return []

    roots = normalize_paths(strategy(environ))
    logger.debug("Candidate Steam roots for %s: %s", family, roots)
    return roots

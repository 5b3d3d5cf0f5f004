"""
Game availability detection.

Combines root location, library folder resolution and manifest probing
to decide whether Running with Rifles is installed.  The scan stops at
the first manifest found.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from common.decorators import timed
from common.exceptions import (
    GameUnavailableError,
    LaunchErrorKind,
    SteamLaunchError,
    SteamUnavailableError,
)

from .constants import RWR_APP_ID
from .library_folders import discover_library_roots
from .manifest import appmanifest_path, path_exists
from .roots import candidate_steam_roots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Availability:
    """Non-raising availability result.

    Attributes:
        available: ``True`` when the game's manifest was found.
        reason: Why the game is unavailable, or ``None`` when available.
    """
    available: bool
    reason: Optional[LaunchErrorKind] = None


class AvailabilityChecker:
    """Decide whether the game is installed in any Steam library.

    The three collaborators default to the real implementations and can
    be replaced for testing.

    Example::

        checker = AvailabilityChecker()
        try:
            checker.check()
        except GameUnavailableError:
            print("Install Running with Rifles first")
    """

    def __init__(
        self,
        app_id: int = RWR_APP_ID,
        root_locator: Callable[[], List[Path]] = candidate_steam_roots,
        library_resolver: Callable[[Path], List[Path]] = discover_library_roots,
        exists: Callable[[Path], bool] = path_exists,
    ) -> None:
        self.app_id = app_id
        self._root_locator = root_locator
        self._library_resolver = library_resolver
        self._exists = exists

    @timed
    def find_manifest(self) -> Optional[Path]:
        """Return the first manifest path that exists, or ``None``.

        Raises:
            SteamUnavailableError: No candidate Steam root exists for
                this platform.
        """
        steam_roots = self._root_locator()
        if not steam_roots:
            raise SteamUnavailableError()

        for root in steam_roots:
            if not self._exists(root):
                logger.debug("Skipping missing Steam root %s", root)
                continue

            for lib_root in self._library_resolver(root):
                manifest = appmanifest_path(lib_root, self.app_id)
                if self._exists(manifest):
                    logger.info("Found app %d manifest at %s", self.app_id, manifest)
                    return manifest

        logger.info("App %d is not installed in any Steam library", self.app_id)
        return None

    def is_installed(self) -> bool:
        """Return ``True`` if the manifest exists in any library.

        Raises:
            SteamUnavailableError: No candidate Steam root exists.
        """
        return self.find_manifest() is not None

    def check(self) -> None:
        """Raise unless the game is installed.

        Raises:
            SteamUnavailableError: No candidate Steam root exists.
            GameUnavailableError: Steam roots exist but no manifest.
        """
        if not self.is_installed():
            raise GameUnavailableError(self.app_id)

    def report(self) -> Availability:
        """Like :meth:`check`, but returns the outcome instead of raising."""
        try:
            self.check()
        except SteamLaunchError as exc:
            return Availability(available=False, reason=exc.kind)
        return Availability(available=True)

"""
Launch dispatch.

Confirms the game is installed, then passes the Steam launch URL to a
URI opener.  Opener failures are classified into the launcher's error
kinds; nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from common.exceptions import (
    LaunchFailedError,
    SteamLaunchError,
    SteamUnavailableError,
)
from common.logging_config import LogContext

from .availability import AvailabilityChecker
from .launch_url import build_launch_url
from .opener import open_url

logger = logging.getLogger(__name__)

#: Signature of a URI opener: raises any exception on failure.
UrlOpener = Callable[[str], None]


def classify_open_failure(url: str, exc: Exception) -> SteamLaunchError:
    """Map an opener failure onto a launcher error.

    A message mentioning ``scheme`` means the OS has no handler for
    ``steam://``, i.e. Steam is not installed or registered.
    """
    if "scheme" in str(exc).lower():
        return SteamUnavailableError(
            "No handler registered for the steam:// scheme", cause=exc,
        )
    return LaunchFailedError(url, cause=exc)


class LaunchDispatcher:
    """Launch the game through Steam.

    Args:
        checker: Availability checker consulted before every launch.
        opener: Callable that opens a URL, raising on failure.
    """

    def __init__(
        self,
        checker: Optional[AvailabilityChecker] = None,
        opener: UrlOpener = open_url,
    ) -> None:
        self.checker = checker or AvailabilityChecker()
        self._opener = opener

    def dispatch(self, url: str) -> None:
        """Open *url* after confirming the game is installed.

        Raises:
            SteamUnavailableError: Steam is absent or the scheme has no
                handler.
            GameUnavailableError: The game is not installed; the opener
                is not called.
            LaunchFailedError: The opener failed for any other reason.
        """
        self.checker.check()

        with LogContext(app_id=self.checker.app_id, url=url):
            logger.info("Dispatching launch URL %s", url)
            try:
                self._opener(url)
            except Exception as exc:
                error = classify_open_failure(url, exc)
                logger.error("Launch failed: %s", error)
                raise error from exc

    def launch(self, args_text: str = "") -> str:
        """Build the launch URL for *args_text* and dispatch it.

        Returns:
            The URL that was handed to the opener.
        """
        url = build_launch_url(args_text, app_id=self.checker.app_id)
        self.dispatch(url)
        return url

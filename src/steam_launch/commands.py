"""
Host command layer.

Coroutines that an asyncio host awaits to check availability and to
launch the game.  Each runs its synchronous body to completion; failures
are raised as :class:`~common.exceptions.SteamLaunchError` and can be
reduced to their stable string code with :func:`error_code`.
"""

from __future__ import annotations

from typing import Optional

from common.exceptions import SteamLaunchError

from .availability import AvailabilityChecker
from .dispatcher import LaunchDispatcher, UrlOpener
from .opener import open_url


def check_availability(checker: Optional[AvailabilityChecker] = None) -> None:
    """Return if the game is installed; raise the matching error otherwise."""
    (checker or AvailabilityChecker()).check()


def launch(
    args_text: str = "",
    checker: Optional[AvailabilityChecker] = None,
    opener: UrlOpener = open_url,
) -> str:
    """Launch the game with *args_text*; returns the dispatched URL."""
    return LaunchDispatcher(checker, opener).launch(args_text)


async def steam_check_rwr_available(
    checker: Optional[AvailabilityChecker] = None,
) -> None:
    check_availability(checker)


async def steam_launch_rwr(
    args_text: str,
    checker: Optional[AvailabilityChecker] = None,
    opener: UrlOpener = open_url,
) -> None:
    launch(args_text, checker, opener)


def error_code(exc: SteamLaunchError) -> str:
    """Return the stable host-facing identifier for *exc*."""
    return exc.kind.value

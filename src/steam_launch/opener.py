"""
Default URI opener.

Hands a URL to the operating system's registered handler: ``os.startfile``
on Windows, ``open`` on macOS and ``xdg-open`` elsewhere.  A missing
handler for the URL's scheme is reported as an :class:`OSError` whose
message mentions the scheme so callers can tell it apart from other
failures.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import sys
from typing import List, Optional

logger = logging.getLogger(__name__)

#: ``ERROR_NO_ASSOCIATION`` returned by ``ShellExecute`` on Windows.
_WINERROR_NO_ASSOCIATION = 1155

#: Markers in opener output meaning "nothing handles this scheme".
_NO_HANDLER_MARKERS = (
    "no method available",          # xdg-open
    "no application knows how",     # macOS open
    "-10814",                       # kLSApplicationNotFoundErr
)


def _scheme_of(url: str) -> str:
    return url.split(":", 1)[0]


def _no_handler_error(url: str, detail: str) -> OSError:
    return OSError(
        f"No handler registered for URL scheme '{_scheme_of(url)}': {detail}"
    )


def _opener_command(platform: str) -> Optional[List[str]]:
    if platform == "darwin":
        return ["open"]
    opener = shutil.which("xdg-open")
    if opener is None:
        return None
    return [opener]


def open_url(url: str, platform: Optional[str] = None) -> None:
    """Open *url* with the system handler.

    Raises:
        FileNotFoundError: No opener program is available.
        OSError: The opener failed; the message mentions the URL scheme
            when no handler is registered for it.
    """
    platform = platform or sys.platform

    if platform == "win32":
        try:
            os.startfile(url)  # type: ignore[attr-defined]
        except OSError as exc:
            if getattr(exc, "winerror", None) == _WINERROR_NO_ASSOCIATION:
                raise _no_handler_error(url, str(exc)) from exc
            raise
        return

    cmd = _opener_command(platform)
    if cmd is None:
        raise FileNotFoundError("xdg-open not found; cannot open URLs")

    logger.debug("Opening %s via %s", url, cmd[0])
    result = subprocess.run(
        cmd + [url],
        capture_output=True,
        text=True,
    )
    if result.returncode == 0:
        return

    detail = (result.stderr or result.stdout or "").strip()
    if any(marker in detail.lower() for marker in _NO_HANDLER_MARKERS):
        raise _no_handler_error(url, detail)
    raise OSError(f"{cmd[0]} exited with status {result.returncode}: {detail}")

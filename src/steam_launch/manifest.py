"""App manifest probing: the presence of ``appmanifest_<id>.acf`` means installed."""

from __future__ import annotations

import logging
from pathlib import Path

from common.decorators import handle_errors

from .constants import RWR_APP_ID, STEAMAPPS_DIR

logger = logging.getLogger(__name__)


def appmanifest_path(library_root: Path, app_id: int = RWR_APP_ID) -> Path:
    """Return ``<library_root>/steamapps/appmanifest_<app_id>.acf``."""
    return library_root / STEAMAPPS_DIR / f"appmanifest_{app_id}.acf"


@handle_errors(OSError, default=False, log_level=logging.DEBUG)
def path_exists(path: Path) -> bool:
    """``Path.exists`` that treats I/O errors as absence."""
    return path.exists()


def has_manifest(library_root: Path, app_id: int = RWR_APP_ID) -> bool:
    """Check whether *library_root* holds the manifest for *app_id*.

    The manifest content is never read.  Any I/O error counts as absent.
    """
    manifest = appmanifest_path(library_root, app_id)
    found = path_exists(manifest)
    logger.debug("Manifest %s: %s", manifest, "found" if found else "absent")
    return found

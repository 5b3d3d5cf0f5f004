"""
Steam library folder resolution.

Steam records additional library locations (e.g. on other drives) in
``steamapps/libraryfolders.vdf``.  Only the ``"path"`` fields are of
interest here, so rather than a full VDF parser this module performs a
line-local extraction that tolerates anything it does not understand.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from common.decorators import handle_errors

from .constants import LIBRARY_FOLDERS_FILE, STEAMAPPS_DIR
from .roots import normalize_paths

logger = logging.getLogger(__name__)

_PATH_KEY = '"path"'


def _extract_path_value(line: str) -> Optional[str]:
    """Return the raw value of a ``"path" "<value>"`` line, or ``None``."""
    line = line.strip()
    if not line.startswith('"'):
        return None
    if not line.startswith(_PATH_KEY):
        return None

    rest = line[len(_PATH_KEY):].strip()
    start = rest.find('"')
    if start < 0:
        return None
    rest = rest[start + 1:]
    end = rest.find('"')
    if end < 0:
        return None
    return rest[:end]


def parse_libraryfolders_paths(vdf_text: str) -> List[Path]:
    """Extract library paths from ``libraryfolders.vdf`` text.

    A line contributes a path only when its first quoted token is
    ``path``; the next quoted token is taken as the value and doubled
    backslashes are collapsed.  No other escapes are recognised and
    nested block structure is ignored.  Malformed lines are skipped.

    Args:
        vdf_text: Raw file contents.

    Returns:
        Deduplicated, sorted list of paths.
    """
    paths: List[Path] = []

    for line in vdf_text.splitlines():
        raw = _extract_path_value(line)
        if raw is None:
            continue
        paths.append(Path(raw.replace("\\\\", "\\")))

    return normalize_paths(paths)


@handle_errors(
    OSError, UnicodeDecodeError,
    default=None,
    log_level=logging.DEBUG,
    message="Cannot read library folders file",
)
def _read_library_folders(path: Path) -> Optional[str]:
    return path.read_text(encoding="utf-8")


def library_folders_file(steam_root: Path) -> Path:
    """Return the path of the library declaration file under *steam_root*."""
    return steam_root / STEAMAPPS_DIR / LIBRARY_FOLDERS_FILE


def discover_library_roots(steam_root: Path) -> List[Path]:
    """Return every library root belonging to *steam_root*.

    The Steam root itself is always included.  Additional roots come
    from ``libraryfolders.vdf``; an unreadable file contributes none.
    """
    roots: List[Path] = [steam_root]

    text = _read_library_folders(library_folders_file(steam_root))
    if text is not None:
        extra = parse_libraryfolders_paths(text)
        for path in extra:
            logger.debug("Found Steam library folder: %s", path)
        roots.extend(extra)

    return normalize_paths(roots)

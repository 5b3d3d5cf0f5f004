"""
Pytest configuration and shared fixtures for launcher tests.

Provides fake Steam trees and URI openers.
"""

import os
import pytest
from unittest.mock import MagicMock, patch
from pathlib import Path
from typing import Generator, List
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============ Environment Fixtures ============

@pytest.fixture
def temp_home(tmp_path: Path) -> Generator[Path, None, None]:
    """Provide a temporary home directory for tests."""
    old_home = os.environ.get('HOME')
    home = tmp_path / "home"
    home.mkdir()
    os.environ['HOME'] = str(home)

    yield home

    if old_home:
        os.environ['HOME'] = old_home
    else:
        os.environ.pop('HOME', None)


@pytest.fixture
def settings_path(tmp_path: Path, monkeypatch) -> Path:
    """Point the settings store at a temporary file."""
    path = tmp_path / "config" / "settings.json"
    monkeypatch.setenv("RWR_LAUNCHER_CONFIG", str(path))
    return path


# ============ Steam Tree Fixtures ============

def make_steam_root(path: Path) -> Path:
    """Create an empty Steam root with a steamapps directory."""
    (path / "steamapps").mkdir(parents=True, exist_ok=True)
    return path


def install_manifest(library_root: Path, app_id: int = 270150) -> Path:
    """Create an appmanifest file inside *library_root*."""
    manifest = library_root / "steamapps" / f"appmanifest_{app_id}.acf"
    manifest.parent.mkdir(parents=True, exist_ok=True)
    manifest.write_text('"AppState"\n{\n\t"appid"\t\t"%d"\n}\n' % app_id)
    return manifest


def write_library_folders(steam_root: Path, libraries: List[Path]) -> Path:
    """Write a libraryfolders.vdf listing *libraries*."""
    lines = ['"libraryfolders"', "{"]
    for i, lib in enumerate(libraries):
        escaped = str(lib).replace("\\", "\\\\")
        lines += [f'\t"{i}"', "\t{", f'\t\t"path"\t\t"{escaped}"', "\t}"]
    lines.append("}")
    vdf = steam_root / "steamapps" / "libraryfolders.vdf"
    vdf.parent.mkdir(parents=True, exist_ok=True)
    vdf.write_text("\n".join(lines) + "\n")
    return vdf


@pytest.fixture
def steam_root(tmp_path: Path) -> Path:
    """Provide an empty Steam root."""
    return make_steam_root(tmp_path / "Steam")


@pytest.fixture
def checker_for(steam_root):
    """Build an AvailabilityChecker whose only candidate is *steam_root*."""
    from steam_launch.availability import AvailabilityChecker

    def factory(*roots: Path) -> AvailabilityChecker:
        candidates = sorted(roots) if roots else [steam_root]
        return AvailabilityChecker(root_locator=lambda: candidates)

    return factory


# ============ Opener Fixtures ============

@pytest.fixture
def fake_opener() -> MagicMock:
    """A URI opener that records calls and succeeds."""
    return MagicMock(return_value=None)


@pytest.fixture
def mock_subprocess_run():
    """Mock subprocess.run for tests."""
    with patch('subprocess.run') as mock_run:
        mock_run.return_value = MagicMock(
            returncode=0,
            stdout="",
            stderr="",
        )
        yield mock_run


# ============ Marker Configuration ============

def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line(
        "markers", "unit: fast unit tests with no external deps"
    )
    config.addinivalue_line(
        "markers", "integration: tests that build Steam trees or settings files on disk"
    )

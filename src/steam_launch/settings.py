"""
Persistent launch settings.

Stores the user's launch switches, ``key=value`` parameters and custom
tokens as JSON under ``~/.config/rwr-launcher/settings.json``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from common.exceptions import InvalidConfigError

from .launch_args import build_launch_args_text

logger = logging.getLogger(__name__)

#: Environment variable overriding the settings file location.
CONFIG_ENV_VAR = "RWR_LAUNCHER_CONFIG"


def default_settings_path() -> Path:
    """Return the settings file path, honouring ``RWR_LAUNCHER_CONFIG``."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".config/rwr-launcher/settings.json"


def _atomic_write_json(path: Path, data: Any) -> None:
    """Write *data* as JSON via a temp file renamed over *path*."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, temp_path = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp",
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_path, path)
    except Exception:
        try:
            os.unlink(temp_path)
        except OSError:
            pass
        raise


@dataclass
class LaunchSettings:
    """User-chosen launch arguments.

    Attributes:
        bool_params: Switch name to enabled flag.
        key_value_params: Parameter name to value.
        custom_tokens: Raw tokens appended verbatim.
    """
    bool_params: Dict[str, bool] = field(default_factory=dict)
    key_value_params: Dict[str, str] = field(default_factory=dict)
    custom_tokens: List[str] = field(default_factory=list)

    def args_text(self) -> str:
        """Return the argument string these settings produce."""
        return build_launch_args_text(
            self.bool_params, self.key_value_params, self.custom_tokens,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bool_params": dict(self.bool_params),
            "key_value_params": dict(self.key_value_params),
            "custom_tokens": list(self.custom_tokens),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LaunchSettings":
        bool_params = data.get("bool_params", {})
        key_value_params = data.get("key_value_params", {})
        custom_tokens = data.get("custom_tokens", [])

        if not isinstance(bool_params, dict):
            raise InvalidConfigError("bool_params", bool_params, "expected an object")
        if not isinstance(key_value_params, dict):
            raise InvalidConfigError(
                "key_value_params", key_value_params, "expected an object",
            )
        if not isinstance(custom_tokens, list):
            raise InvalidConfigError("custom_tokens", custom_tokens, "expected a list")

        for name, value in bool_params.items():
            if not isinstance(value, bool):
                raise InvalidConfigError(
                    f"bool_params.{name}", value, "expected true or false",
                )

        return cls(
            bool_params={str(k): v for k, v in bool_params.items()},
            key_value_params={str(k): str(v) for k, v in key_value_params.items()},
            custom_tokens=[str(t) for t in custom_tokens],
        )


class SettingsStore:
    """Load, modify and save :class:`LaunchSettings`.

    Every mutator saves immediately.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = path or default_settings_path()
        self._settings: Optional[LaunchSettings] = None

    @property
    def settings(self) -> LaunchSettings:
        if self._settings is None:
            self._settings = self.load()
        return self._settings

    def load(self) -> LaunchSettings:
        """Read settings from disk; a missing file yields defaults.

        Raises:
            InvalidConfigError: The file is not valid settings JSON.
        """
        if not self.path.exists():
            logger.debug("No settings file at %s; using defaults", self.path)
            self._settings = LaunchSettings()
            return self._settings

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise InvalidConfigError(str(self.path), "<unreadable>", str(exc)) from exc

        if not isinstance(data, dict):
            raise InvalidConfigError(str(self.path), type(data).__name__, "expected an object")

        self._settings = LaunchSettings.from_dict(data)
        return self._settings

    def save(self) -> None:
        _atomic_write_json(self.path, self.settings.to_dict())
        logger.info("Saved launch settings to %s", self.path)

    def set_bool_param(self, name: str, enabled: bool) -> None:
        self.settings.bool_params[name] = enabled
        self.save()

    def set_key_value_param(self, key: str, value: str) -> None:
        self.settings.key_value_params[key] = value
        self.save()

    def remove_key_value_param(self, key: str) -> bool:
        """Remove *key*; returns ``False`` if it was not set."""
        if key not in self.settings.key_value_params:
            return False
        del self.settings.key_value_params[key]
        self.save()
        return True

    def set_custom_tokens_from_text(self, text: str) -> None:
        """Replace custom tokens with the non-blank lines of *text*."""
        tokens = [line.strip() for line in text.splitlines()]
        self.settings.custom_tokens = [t for t in tokens if t]
        self.save()

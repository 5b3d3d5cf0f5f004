"""
Launch argument composition.

Builds the free-form argument string passed to the game from three
sources: boolean switches, ``key=value`` parameters and raw custom
tokens.
"""

from __future__ import annotations

import re
from typing import Dict, Iterable, List, Mapping

#: Boolean switches understood by the game, with display labels.
KNOWN_BOOL_PARAMS: Dict[str, str] = {
    "skip_nat_server_usage": "Skip NAT server usage",
    "debugmode": "Debug mode",
    "no_simulation": "Disable simulation",
    "no_ai": "Disable AI",
    "metagame_debugmode": "Metagame debug mode",
    "verbose": "Verbose logging",
    "opengl": "Use OpenGL renderer",
    "flip": "Flip screen",
    "big_water": "Big water",
}

_WHITESPACE = re.compile(r"\s")


def unique_tokens(tokens: Iterable[str]) -> List[str]:
    """Trim *tokens*, drop blanks and keep the first of any duplicates."""
    out: List[str] = []
    seen = set()
    for raw in tokens:
        token = raw.strip()
        if not token or token in seen:
            continue
        seen.add(token)
        out.append(token)
    return out


def _key_value_tokens(params: Mapping[str, str]) -> List[str]:
    tokens = []
    # Sorted by key for stable output.
    for key in sorted(params):
        value = params[key] or ""
        key, value = key.strip(), value.strip()
        if not key or _WHITESPACE.search(key):
            continue
        if not value or "\n" in value:
            continue
        tokens.append(f"{key}={value}")
    return tokens


def build_launch_args_text(
    bool_params: Mapping[str, bool],
    key_value_params: Mapping[str, str],
    custom_tokens: Iterable[str],
) -> str:
    """Compose the argument string for a launch.

    Enabled switches come first (in mapping order), then ``key=value``
    pairs sorted by key, then custom tokens.  Pairs with an empty or
    whitespace-containing key, or an empty value, are dropped.

    >>> build_launch_args_text({"verbose": True, "no_ai": False},
    ...                        {"map": "map4"}, ["verbose", "-x"])
    'verbose map=map4 -x'
    """
    tokens = [key for key, enabled in bool_params.items() if enabled]
    tokens.extend(_key_value_tokens(key_value_params))
    tokens.extend(custom_tokens)
    return " ".join(unique_tokens(tokens))

"""
Steam launch URL construction.

Steam starts an installed game from ``steam://run/<appid>/``; extra
command-line arguments follow a double slash:
``steam://run/<appid>//<percent-encoded args>``.
"""

from __future__ import annotations

from .constants import RWR_APP_ID, STEAM_SCHEME

#: Bytes passed through unchanged (RFC 3986 unreserved characters).
_UNRESERVED = frozenset(
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b"0123456789"
    b"-._~"
)


def percent_encode(text: str) -> str:
    """Percent-encode *text* byte by byte over its UTF-8 encoding.

    Unreserved bytes pass through, a space becomes ``%20`` and every
    other byte becomes ``%XX`` with uppercase hex digits.

    >>> percent_encode("abc def_9-X.~")
    'abc%20def_9-X.~'
    """
    out = []
    for byte in text.encode("utf-8"):
        if byte in _UNRESERVED:
            out.append(chr(byte))
        elif byte == 0x20:
            out.append("%20")
        else:
            out.append(f"%{byte:02X}")
    return "".join(out)


def build_launch_url(
    args_text: str = "",
    app_id: int = RWR_APP_ID,
    scheme: str = STEAM_SCHEME,
) -> str:
    """Return the Steam URL that launches *app_id* with *args_text*.

    >>> build_launch_url("  ")
    'steam://run/270150/'
    >>> build_launch_url("abc def")
    'steam://run/270150//abc%20def'
    """
    encoded = percent_encode(args_text.strip())
    if not encoded:
        return f"{scheme}://run/{app_id}/"
    return f"{scheme}://run/{app_id}//{encoded}"

#!/usr/bin/env python3
"""
RWR Launcher CLI

Command-line interface for checking, configuring and launching Running
with Rifles through Steam.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from common.exceptions import InvalidConfigError, SteamLaunchError
from common.logging_config import setup_logging

from .commands import check_availability, error_code, launch
from .constants import RWR_APP_ID, RWR_GAME_NAME
from .launch_args import KNOWN_BOOL_PARAMS
from .launch_url import build_launch_url
from .settings import SettingsStore

logger = logging.getLogger(__name__)


def get_store() -> SettingsStore:
    """Load and return the settings store."""
    store = SettingsStore()
    try:
        store.load()
    except InvalidConfigError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    return store


def _report_error(args, exc: SteamLaunchError) -> int:
    if getattr(args, "json", False):
        print(json.dumps(exc.to_dict()))
    else:
        print(f"{error_code(exc)}: {exc.message}", file=sys.stderr)
    return 1


def cmd_check(args):
    """Check whether the game is installed."""
    try:
        check_availability()
    except SteamLaunchError as e:
        return _report_error(args, e)

    if args.json:
        print(json.dumps({"ok": True}))
    else:
        print(f"{RWR_GAME_NAME} (app {RWR_APP_ID}) is installed.")
    return 0


def cmd_url(args):
    """Print the launch URL without launching."""
    print(build_launch_url(args.launch_args))
    return 0


def cmd_args(args):
    """Print the argument text built from saved settings."""
    print(get_store().settings.args_text())
    return 0


def cmd_launch(args):
    """Launch the game."""
    if args.launch_args is None:
        args_text = get_store().settings.args_text()
    else:
        args_text = args.launch_args

    try:
        url = launch(args_text)
    except SteamLaunchError as e:
        return _report_error(args, e)

    if args.json:
        print(json.dumps({"ok": True, "url": url}))
    else:
        print(f"Launched {RWR_GAME_NAME}: {url}")
    return 0


def cmd_params(args):
    """List known launch switches and their saved state."""
    settings = get_store().settings

    print("Switches:\n")
    for name, label in KNOWN_BOOL_PARAMS.items():
        mark = "x" if settings.bool_params.get(name) else " "
        print(f"  [{mark}] {name:<24} {label}")

    if settings.key_value_params:
        print("\nParameters:\n")
        for key in sorted(settings.key_value_params):
            print(f"  {key}={settings.key_value_params[key]}")

    if settings.custom_tokens:
        print("\nCustom tokens:\n")
        for token in settings.custom_tokens:
            print(f"  {token}")

    return 0


def _save_failed(exc: OSError) -> int:
    print(f"Error: cannot save settings: {exc}", file=sys.stderr)
    return 1


def cmd_set_flag(args):
    """Enable or disable a launch switch."""
    if args.name not in KNOWN_BOOL_PARAMS:
        print(f"Unknown switch: {args.name}", file=sys.stderr)
        print(f"Valid switches: {', '.join(KNOWN_BOOL_PARAMS)}")
        return 1

    try:
        get_store().set_bool_param(args.name, args.state == "on")
    except OSError as e:
        return _save_failed(e)
    print(f"{args.name}: {args.state}")
    return 0


def cmd_set_param(args):
    """Set a key=value launch parameter."""
    try:
        get_store().set_key_value_param(args.key, args.value)
    except OSError as e:
        return _save_failed(e)
    print(f"{args.key}={args.value}")
    return 0


def cmd_unset_param(args):
    """Remove a key=value launch parameter."""
    try:
        removed = get_store().remove_key_value_param(args.key)
    except OSError as e:
        return _save_failed(e)
    if not removed:
        print(f"Parameter not set: {args.key}", file=sys.stderr)
        return 1
    print(f"Removed {args.key}")
    return 0


def cmd_set_tokens(args):
    """Replace custom tokens (one per line)."""
    store = get_store()
    try:
        store.set_custom_tokens_from_text(args.text)
    except OSError as e:
        return _save_failed(e)
    print(f"Saved {len(store.settings.custom_tokens)} custom token(s)")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rwr-launcher",
        description=f"Launch {RWR_GAME_NAME} through Steam",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )
    parser.add_argument(
        "--log-file", type=Path, metavar="PATH",
        help="Also write a DEBUG log to PATH",
    )
    parser.add_argument(
        "--json-logs", action="store_true", help="Write the log file as JSON lines"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # check
    check_p = subparsers.add_parser("check", help="Check if the game is installed")
    check_p.add_argument("--json", action="store_true", help="JSON output")
    check_p.set_defaults(func=cmd_check)

    # url
    url_p = subparsers.add_parser("url", help="Print the launch URL")
    url_p.add_argument("launch_args", nargs="?", default="", help="Argument text")
    url_p.set_defaults(func=cmd_url)

    # args
    args_p = subparsers.add_parser("args", help="Print saved argument text")
    args_p.set_defaults(func=cmd_args)

    # launch
    launch_p = subparsers.add_parser("launch", help="Launch the game")
    launch_p.add_argument(
        "launch_args", nargs="?", default=None,
        help="Argument text (default: from saved settings)",
    )
    launch_p.add_argument("--json", action="store_true", help="JSON output")
    launch_p.set_defaults(func=cmd_launch)

    # params
    params_p = subparsers.add_parser("params", help="Show saved launch parameters")
    params_p.set_defaults(func=cmd_params)

    # set-flag
    flag_p = subparsers.add_parser("set-flag", help="Toggle a launch switch")
    flag_p.add_argument("name", help="Switch name")
    flag_p.add_argument("state", choices=["on", "off"])
    flag_p.set_defaults(func=cmd_set_flag)

    # set-param
    param_p = subparsers.add_parser("set-param", help="Set a key=value parameter")
    param_p.add_argument("key")
    param_p.add_argument("value")
    param_p.set_defaults(func=cmd_set_param)

    # unset-param
    unset_p = subparsers.add_parser("unset-param", help="Remove a parameter")
    unset_p.add_argument("key")
    unset_p.set_defaults(func=cmd_unset_param)

    # set-tokens
    tokens_p = subparsers.add_parser("set-tokens", help="Set custom tokens")
    tokens_p.add_argument("text", help="Tokens, one per line")
    tokens_p.set_defaults(func=cmd_set_tokens)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        log_file=args.log_file,
        json_logs=args.json_logs,
    )

    if args.command is None:
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

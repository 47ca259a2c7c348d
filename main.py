from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import List

from ghostpath import __version__
from ghostpath.config import (
    CONFIG_ENV_VAR,
    AppConfig,
    ConfigError,
    find_config_path,
    initialize_default_config,
    load_app_config,
)
from ghostpath.ui import build_console, configure_logging
from interface.keys import KeySequence, parse_key_sequence
from interface.path_dialog import NewSessionDialog
from interface.render import render_dialog


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Directory picker with inline ghost-text completion", add_help=True)
    parser.add_argument("text", nargs="?", help="Initial path text; the cursor starts at its end")
    parser.add_argument(
        "--keys",
        default="",
        help='Comma-separated keys to replay, prompt_toolkit names, e.g. "s,r,right,c-left,escape b,home"',
    )
    parser.add_argument("--config", help="Path to config TOML file")
    parser.add_argument("--cwd", help="Directory that relative paths complete against")
    parser.add_argument("--submit", action="store_true", help="Validate the result and print the chosen directory")
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> AppConfig:
    cli_path = Path(args.config).expanduser() if args.config else None
    if cli_path and not cli_path.is_file():
        raise ConfigError(f"Config file not found: {cli_path}")
    auto_path = cli_path or find_config_path()
    if not auto_path:
        auto_path = initialize_default_config(os.getenv(CONFIG_ENV_VAR))
        print(f"Initialized default config at {auto_path}", file=sys.stderr)
    return load_app_config(auto_path)


def replay_keys(dialog: NewSessionDialog, events: List[KeySequence]) -> None:
    for event in events:
        dialog.handle_key(event)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.version:
        print(f"ghostpath {__version__}")
        return 0

    try:
        config = load_config(args)
    except ConfigError as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 1

    try:
        events = parse_key_sequence(args.keys)
    except ValueError as exc:
        print(f"Key error: {exc}", file=sys.stderr)
        return 2

    console = build_console(config.ui.rich)
    configure_logging(console)

    if args.cwd:
        try:
            os.chdir(Path(args.cwd).expanduser())
        except OSError as exc:
            print(f"cd: {args.cwd}: {exc.strerror}", file=sys.stderr)
            return 1

    dialog = NewSessionDialog(config, path=args.text)
    replay_keys(dialog, events)
    console.print(render_dialog(dialog, config.ui))

    if args.submit:
        request = dialog.submit()
        if request is None:
            console.print(render_dialog(dialog, config.ui))
            return 1
        print(request.path, file=sys.stdout)

    return 0


if __name__ == "__main__":
    sys.exit(main())

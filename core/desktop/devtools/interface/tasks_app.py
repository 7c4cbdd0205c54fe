#!/usr/bin/env python3
"""
taskman: terminal task tracker.

Tasks live in a single JSON save file (``~/taskman.json`` unless configured).
This module is the process entry point; the session itself is in tui_app.
"""

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path
from typing import Optional, Sequence

from config import get_save_file, set_user_lang
from core import LayoutError
from core.desktop.devtools.interface.i18n import available_langs
from core.desktop.devtools.interface.tui_app import TaskTrackerTUI, cmd_tui
from util.logging_setup import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(prog="taskman", description="Terminal task tracker")
    parser.add_argument(
        "save_file",
        nargs="?",
        default=None,
        help="JSON file to load tasks from and save them to",
    )
    parser.add_argument(
        "--lang",
        choices=available_langs(),
        help="Remember interface language in the user config and exit",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("taskman"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if args.lang:
        set_user_lang(args.lang)
        print(f"lang: {args.lang}")
        return 0
    args.save_file = str(Path(args.save_file).expanduser()) if args.save_file else str(get_save_file())
    setup_logging()
    try:
        return cmd_tui(args)
    except LayoutError as exc:
        print(f"taskman: {exc}", file=sys.stderr)
        return 1


__all__ = ["build_parser", "main", "TaskTrackerTUI", "cmd_tui"]


if __name__ == "__main__":
    sys.exit(main())

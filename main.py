#!/usr/bin/env python3
"""Thin entrypoint for helpwin."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO

from _version import __version__
from config import Config, load_config
from help_content import render_help
from help_document import HelpDocumentError, load_document
from logging_utils import setup_logging
from orchestrator import Orchestrator
from stylize import StyledLine

ANSI_BOLD = "\033[1m"
ANSI_RESET = "\033[0m"


class UsageError(Exception):
    pass


def _print_help() -> None:
    print(
        "helpwin - keyboard-first help overlay for the terminal\n\n"
        "Usage:\n"
        "  helpwin              Launch curses UI\n"
        "  helpwin -p [-w N]    Print the help text, wrapped to N columns\n"
        "  helpwin -h           Show this help\n"
        "  helpwin -v           Show installed version\n"
    )


def parse_args(argv: Sequence[str]) -> tuple[Optional[int], bool, bool, bool]:
    width: Optional[int] = None
    show_version = False
    show_help = False
    print_mode = False

    idx = 0
    while idx < len(argv):
        arg = argv[idx]
        if arg == "-h":
            show_help = True
            idx += 1
            continue
        if arg == "-v":
            show_version = True
            idx += 1
            continue
        if arg == "-p":
            print_mode = True
            idx += 1
            continue
        if arg == "-w":
            idx += 1
            if idx >= len(argv):
                raise UsageError("-w requires a width argument")
            try:
                width = int(argv[idx])
            except ValueError as exc:
                raise UsageError(f"-w expects an integer, got '{argv[idx]}'") from exc
            if width < 1:
                raise UsageError("-w must be a positive integer")
            idx += 1
            continue
        raise UsageError(f"Unknown flag '{arg}'")
    return width, show_version, show_help, print_mode


def format_styled_line(line: StyledLine, bold_escapes: bool) -> str:
    parts = []
    for segment in line:
        if segment.bold and bold_escapes and segment.text:
            parts.append(f"{ANSI_BOLD}{segment.text}{ANSI_RESET}")
        else:
            parts.append(segment.text)
    return "".join(parts)


def print_help_text(config: Config, width: Optional[int], out: TextIO) -> None:
    lines = render_help(width or config.print_width, load_document(config.document_path))
    bold_escapes = out.isatty()
    for line in lines:
        out.write(format_styled_line(line, bold_escapes) + "\n")


def main(argv: list[str] | None = None) -> int:
    # Make ESC detection snappy inside curses.
    os.environ.setdefault("ESCDELAY", "25")

    if argv is None:
        argv = sys.argv[1:]

    try:
        width, show_version, show_help, print_mode = parse_args(argv)
    except UsageError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if show_version:
        print(__version__)
        return 0

    if show_help:
        _print_help()
        return 0

    config = load_config()
    setup_logging(config.log_file)

    try:
        if print_mode:
            print_help_text(config, width, sys.stdout)
            return 0
        orchestrator = Orchestrator(config)
    except HelpDocumentError as exc:
        print(f"helpwin: {exc}", file=sys.stderr)
        return 1

    return orchestrator.run()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(130)

# src/main.py — v1
"""CLI entry point: write and backups commands.

Usage:
    rotolog write [options] < input.txt
    rotolog backups <directory> <file>

Settings not given on the command line come from ROTOLOG_* environment
variables (see config/settings.py).
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from rotolog.core.diagnostics import setup_diagnostics
from rotolog.version import __version__

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None, stdin: TextIO | None = None) -> int:
    """Main CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)

    if not hasattr(args, "func"):
        parser.print_help()
        return 1

    try:
        return args.func(args, stdin or sys.stdin)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except Exception as exc:
        logger.error("Fatal error: %s", exc, exc_info=args.verbose)
        return 1


def _build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="rotolog",
        description=f"rotolog v{__version__}: leveled logging with size-based file rotation",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Show rotolog's own debug diagnostics",
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- write ---
    p_write = subparsers.add_parser(
        "write", help="Log each line read from stdin",
    )
    p_write.add_argument(
        "-l", "--level", default="INFO",
        help="Level of every line: DEBUG, INFO, WARN, ERROR, CRITICAL (default: INFO)",
    )
    p_write.add_argument("-d", "--directory", type=Path, default=None, help="Log directory")
    p_write.add_argument("-f", "--file", default=None, help="Log file name")
    p_write.add_argument(
        "--max-size", default=None,
        help="Rotate when the file grows past this size, e.g. 10MB",
    )
    p_write.add_argument("--backups", type=int, default=None, help="Backups to keep")
    p_write.add_argument("--format", dest="line_format", default=None, help="Line template (%%d %%l %%m)")
    p_write.add_argument(
        "--no-console", action="store_true",
        help="Do not echo lines to stderr",
    )
    p_write.set_defaults(func=_cmd_write)

    # --- backups ---
    p_backups = subparsers.add_parser(
        "backups", help="List backups of a log file, oldest first",
    )
    p_backups.add_argument("directory", type=Path, help="Log directory")
    p_backups.add_argument("file", help="Active log file name, e.g. app.log")
    p_backups.set_defaults(func=_cmd_backups)

    return parser


def _cmd_write(args: argparse.Namespace, stdin: TextIO) -> int:
    """Log stdin line by line through the configured handlers."""
    from rotolog.config.settings import load_settings
    from rotolog.logger.logger_factory import create_logger

    overrides: dict[str, object] = {}
    if args.directory is not None:
        overrides["log_directory"] = args.directory
    if args.file is not None:
        overrides["log_file_name"] = args.file
    if args.max_size is not None:
        overrides["max_file_size"] = args.max_size
    if args.backups is not None:
        overrides["max_backup_count"] = args.backups
    if args.line_format is not None:
        overrides["log_format"] = args.line_format
    if args.no_console:
        overrides["console_enabled"] = False

    settings = load_settings(**overrides)
    failed = 0
    with create_logger(settings) as log:
        for line in stdin:
            line = line.rstrip("\r\n")
            if not line:
                continue
            if log.log(args.level, line):
                failed += 1

    if failed:
        logger.error("%d line(s) could not be written by every handler", failed)
        return 1
    return 0


def _cmd_backups(args: argparse.Namespace, stdin: TextIO) -> int:
    """Print the backups of a log file with their sizes."""
    from rotolog.handlers.backups import list_backups, sort_backups

    directory: Path = args.directory
    if not directory.is_dir():
        logger.error("Not a directory: %s", directory)
        return 1

    names = sort_backups(list_backups(directory, args.file))
    if not names:
        print(f"No backups of {args.file} in {directory}")
        return 0

    for name in names:
        size = (directory / name).stat().st_size
        print(f"{name}\t{size}")
    return 0


def _setup_logging(verbose: bool) -> None:
    """Route rotolog diagnostics to stderr for CLI usage."""
    setup_diagnostics("DEBUG" if verbose else "WARNING", stream=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())

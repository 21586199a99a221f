#!/usr/bin/env python3
"""
phind: Find files and directories recursively, with sensible default excludes

Common usage:
  phind
  phind src --name '*.py'
  phind . --type d --maxdepth 2
  phind --exclude build/ --exclude '*.log' --relative

Exclude patterns are combined from built-in defaults, the global ignore file,
and --exclude flags, and always win over --name patterns. Excluded directories
are not descended into.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from phind.config import PhindConfig
from phind.logging_setup import LOG_LEVEL_ENV, configure_logging
from phind.walker import DirectoryWalker, Entry, LoggingDiagnostics, MatchType, WalkOptions
from phind.walker.defaults import DEFAULT_INCLUDES


@dataclass
class Options:
    """Command-line options for the phind tool."""

    path: str
    name: list[str]
    exclude: list[str]
    skip_global_ignore: bool
    type: MatchType
    maxdepth: int | None
    ignore_case: bool
    relative: bool
    log_level: str | None
    version: bool


def _non_negative_int(value: str) -> int:
    try:
        depth = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid depth: {value!r}") from None
    if depth < 0:
        raise argparse.ArgumentTypeError(f"depth must be 0 or more, got {depth}")
    return depth


def _parse_args(args: list[str] | None, config: PhindConfig) -> Options:
    """
    Parse command-line arguments. `config` supplies the global ignore path and
    default excludes shown in the help text.
    """
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="phind",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory to search in (default: %(default)s)",
    )
    parser.add_argument(
        "-n",
        "--name",
        action="append",
        default=None,
        metavar="PATTERN",
        help="Glob pattern for names or paths to include. Can be repeated (default: '*')",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help=f"Glob pattern to exclude. Can be repeated. Always excluded: "
        f"{config.describe_default_excludes()}. Also reads {config.global_ignore_path} "
        "unless --skip-global-ignore is used",
    )
    parser.add_argument(
        "--skip-global-ignore",
        "--no-global-ignore",
        action="store_true",
        dest="skip_global_ignore",
        help="Do not load patterns from the global ignore file",
    )
    parser.add_argument(
        "-t",
        "--type",
        choices=["f", "d"],
        default=None,
        help="Match only files (f) or directories (d)",
    )
    parser.add_argument(
        "-d",
        "--maxdepth",
        type=_non_negative_int,
        default=None,
        metavar="N",
        help="Maximum directory levels to descend (0 means the starting path only; "
        "default: unlimited)",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        dest="ignore_case",
        help="Perform case-insensitive matching",
    )
    parser.add_argument(
        "-r",
        "--relative",
        action="store_true",
        help="Print paths relative to the starting directory",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        dest="log_level",
        default=None,
        metavar="LEVEL",
        help=f"Logging level for diagnostics on stderr (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    opts = parser.parse_args(args)

    return Options(
        path=opts.path,
        name=opts.name if opts.name is not None else list(DEFAULT_INCLUDES),
        exclude=opts.exclude,
        skip_global_ignore=opts.skip_global_ignore,
        type=MatchType(opts.type) if opts.type else MatchType.ANY,
        maxdepth=opts.maxdepth,
        ignore_case=opts.ignore_case,
        relative=opts.relative,
        log_level=opts.log_level,
        version=opts.version,
    )


def _validate_start_path(raw_path: str) -> Path:
    """Resolve the start path, raising `ValueError` if it is not a usable directory."""
    start_path = Path(raw_path).resolve()
    if not start_path.exists():
        raise ValueError(f'Start path "{raw_path}" not found (resolved to "{start_path}").')
    if not start_path.is_dir():
        raise ValueError(
            f'Start path "{raw_path}" is not a directory (resolved to "{start_path}").'
        )
    return start_path


def _format_entry(entry: Entry, relative: bool) -> str:
    return entry.relative if relative else str(entry.path)


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the phind CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    config = PhindConfig()
    options = _parse_args(args, config)

    # Display version information if requested
    if options.version:
        try:
            version = importlib.metadata.version("phind")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    configure_logging(options.log_level)

    if not options.skip_global_ignore:
        config.load_global_ignores()
    config.set_cli_excludes(options.exclude)

    try:
        start_path = _validate_start_path(options.path)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    walk_options = WalkOptions(
        include_patterns=options.name,
        exclude_patterns=config.effective_exclude,
        match_type=options.type,
        max_depth=options.maxdepth,
        ignore_case=options.ignore_case,
    )
    try:
        walker = DirectoryWalker(walk_options, LoggingDiagnostics())
    except ValueError as e:
        # Invalid glob syntax, reported before anything is read.
        print(f"Error: Invalid pattern: {e}", file=sys.stderr)
        return 1

    try:
        walker.walk(start_path, lambda entry: print(_format_entry(entry, options.relative)))
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Command-line argument parsing for tree-export.

This module defines the command-line interface for tree-export, handling argument
parsing, validation of option values, and merging of command-line overrides over
the options loaded from a config file.
"""

import argparse
import re
from pathlib import Path
from typing import Any, Dict, NoReturn, Optional, Sequence, Tuple

from tree_export import __version__
from tree_export.exceptions import ConfigurationError
from tree_export.options import Options

PROG = "tree-export"
HELP_HINT = f'Run "{PROG} --help" for usage information.'

_NON_NEGATIVE_INTEGER = re.compile(r"\+?[0-9]+")


class TreeExportArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports syntax errors with exit status 1.

    Every argument error is reported as ``Error: <message>`` followed by a hint
    to run ``--help``, instead of argparse's usage dump and status 2.
    """

    def error(self, message: str) -> NoReturn:
        self.exit(1, f"Error: {message}\n{HELP_HINT}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with tree-export's options.
    """
    description = """
    tree-export: print a directory tree as ASCII art.

    Directories are listed by default; files are added with -f/--include-files.
    Options are read from a JSON config file (config/config.json in the current
    directory unless -c/--config is given) and individual flags override the
    values found there.

    Config file keys:
      excludeDirs   list of glob patterns for directory names to skip
      excludeFiles  list of glob patterns for file names to skip
      includeFiles  true to list files as well as directories
      maxDepth      levels to expand below the root (null for unlimited)
    """

    epilog = """
    Examples:
      # Directories below the current directory
      tree-export

      # Files too, two levels deep
      tree-export --include-files --max-depth 2

      # Skip dependency and VCS directories in another project
      tree-export --exclude-dirs "node_modules,.git" /path/to/project

      # Ignore the config file and list files
      tree-export --no-config --include-files

      # Only the root's immediate children
      tree-export -d 0
    """

    parser = TreeExportArgumentParser(
        prog=PROG,
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"{PROG} {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=None,
        help="The directory to render (default: the current working directory).",
    )
    parser.add_argument(
        "-f",
        "--include-files",
        action="store_const",
        const=True,
        default=None,
        help="Include files in the output (default: from config, or false).",
    )
    parser.add_argument(
        "--no-include-files",
        action="store_true",
        help="Show only directories. Takes precedence over -f/--include-files.",
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        metavar="N",
        help="Maximum number of levels to expand below the root (0 = root's children only, omit for unlimited).",
    )
    parser.add_argument(
        "-D",
        "--exclude-dirs",
        metavar="PATTERNS",
        help="Comma-separated glob patterns for directory names to exclude.",
    )
    parser.add_argument(
        "-X",
        "--exclude-files",
        metavar="PATTERNS",
        help="Comma-separated glob patterns for file names to exclude.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="PATH",
        help="Path to a custom config file.",
    )
    parser.add_argument(
        "--no-config",
        action="store_true",
        help="Ignore the config file entirely.",
    )

    return parser


def split_patterns(value: str) -> Tuple[str, ...]:
    """Split a comma-separated pattern list, trimming entries and dropping empty ones.

    Example:
        >>> split_patterns("node_modules, .git,, dist ")
        ('node_modules', '.git', 'dist')
    """
    return tuple(pattern.strip() for pattern in value.split(",") if pattern.strip())


def parse_max_depth(value: str) -> int:
    """Parse a --max-depth value.

    Args:
        value: The raw command-line value.

    Returns:
        The depth as a non-negative integer.

    Raises:
        ConfigurationError: If the value is not a base-10 non-negative integer.

    Example:
        >>> parse_max_depth("0")
        0
        >>> parse_max_depth("2.5")
        Traceback (most recent call last):
          ...
        tree_export.exceptions.ConfigurationError: Invalid --max-depth value: "2.5". Must be a non-negative integer.
    """
    if not _NON_NEGATIVE_INTEGER.fullmatch(value.strip()):
        raise ConfigurationError(f'Invalid --max-depth value: "{value}". Must be a non-negative integer.')
    return int(value)


def merge_options(config_options: Options, args: argparse.Namespace) -> Options:
    """Apply command-line overrides on top of the options loaded from config.

    Only flags that were actually given override their field. An explicit
    ``--max-depth 0`` is kept as 0 and never confused with an absent flag.

    Args:
        config_options: Options loaded from the config file (or the defaults).
        args: Parsed command-line arguments.

    Returns:
        The merged options.

    Raises:
        ConfigurationError: If --max-depth is invalid.
    """
    changes: Dict[str, Any] = {}

    if args.no_include_files:
        changes["include_files"] = False
    elif args.include_files is not None:
        changes["include_files"] = args.include_files

    if args.max_depth is not None:
        changes["max_depth"] = parse_max_depth(args.max_depth)

    if args.exclude_dirs is not None:
        changes["exclude_dirs"] = split_patterns(args.exclude_dirs)

    if args.exclude_files is not None:
        changes["exclude_files"] = split_patterns(args.exclude_files)

    return config_options.replace(**changes)


def resolve_config_path(args: argparse.Namespace) -> Optional[Path]:
    """Return the config path requested on the command line, if any."""
    if args.config is None:
        return None
    return args.config.resolve()


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments, exiting with status 1 on syntax errors."""
    return create_parser().parse_args(argv)

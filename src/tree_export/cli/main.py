"""Command-line interface for tree-export.

This module provides the command-line entry point. It parses arguments, loads and
merges the config file, renders the tree, and maps failures to exit codes.

Exit Codes:
    0: Successful completion (including --help and --version)
    1: Argument error, invalid option value, or filesystem error during rendering
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Directories below the current directory
    $ tree-export

    # Files too, excluding test files, two levels deep
    $ tree-export -f -X "*.test.js" -d 2 /path/to/project
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from tree_export.cli.argparser import HELP_HINT, merge_options, parse_args, resolve_config_path
from tree_export.cli.safe_writer import SafeWriter
from tree_export.cli.signal_handler import setup_signal_handling, signal_handler
from tree_export.config import NO_CONFIG, NoConfig, load_config
from tree_export.exceptions import ConfigurationError
from tree_export.options import Options
from tree_export.tree_renderer import render
from tree_export.types import PathType

logger = logging.getLogger(__name__)

ROOT_LABEL = "."


def build_output(root: PathType, options: Options) -> str:
    """Render the complete tree text for a root directory, labelled with ".".

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     build_output(tmpdir, Options())
        '.\\n'
    """
    return ROOT_LABEL + "\n" + render(root, options)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the tree-export command-line interface.

    Args:
        argv: Command-line arguments without the program name. Defaults to sys.argv[1:].

    Exit codes:
        0: Successful completion
        1: Argument error, invalid option value, or filesystem error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # argparse exits with 0 for --help/--version and 1 for syntax errors
        args = parse_args(argv)

        config_path: Union[Path, NoConfig, None] = NO_CONFIG if args.no_config else resolve_config_path(args)
        options = merge_options(load_config(config_path), args)
        logger.debug("Resolved options: %s", options)

        root = args.directory.resolve() if args.directory is not None else Path.cwd()
        output = build_output(root, options)

        with SafeWriter() as safe_writer:
            try:
                safe_writer.write(output + "\n")
            except BrokenPipeError:
                pass

    except ConfigurationError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print(HELP_HINT, file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()

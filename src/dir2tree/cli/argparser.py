"""Command-line argument parsing for dir2tree.

This module defines the command-line interface for dir2tree,
handling argument parsing and validation.
"""

import argparse
import codecs
from pathlib import Path

from dir2tree import __version__
from dir2tree.exclusion_rules.pattern_rules import DEFAULT_PATTERN_SOURCES


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with dir2tree's options.
    """
    description = """
    dir2tree: A utility for producing a filtered inventory of a directory tree.

    The directory is walked once. Entries are dropped when they match a rule from
    the directory's pattern sources (.gitignore, .dockerignore, .npmignore), when
    they are short all-lowercase directory names that look like build output
    (bin, obj, dist), when they are dot-files and no .gitignore is present, or when
    an extension allow-list is given and a file's extension is not on it.

    The result is rendered as a JSON structure and as a box-drawing tree.
    """

    epilog = """
    Examples:
      # Print the glyph tree and the JSON structure
      dir2tree /path/to/project

      # Write <name>-tree.json and <name>.txt into a directory
      dir2tree -o out/ /path/to/project

      # Only keep Markdown and text files
      dir2tree -x .md -x .txt /path/to/project

      # Add rules on top of the pattern sources
      dir2tree -i "*.log" -i "fixtures/" /path/to/project

      # Use a different set of pattern sources (the first one is the strict source)
      dir2tree --pattern-source .treeignore --pattern-source .gitignore /path/to/project

      # Print only the glyph tree, with a summary on stderr
      dir2tree -f tree -s /path/to/project
    """

    parser = argparse.ArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Version information
    parser.add_argument(
        "-V", "--version", action="version", version=f"dir2tree {__version__}", help="Show the version and exit"
    )

    parser.add_argument(
        "directory",
        type=Path,
        help="The directory to inventory. Pattern sources are looked up in this directory.",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        type=Path,
        metavar="DIR",
        help=(
            "Directory receiving <name>-tree.json and <name>.txt. If not specified, the output is written to stdout."
        ),
    )
    parser.add_argument(
        "-x",
        "--extension",
        dest="extensions",
        action="append",
        default=[],
        metavar="EXT",
        help="Only keep files with this extension (e.g. .md). Can be specified multiple times.",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        dest="patterns",
        action="append",
        default=[],
        metavar="PATTERN",
        help=(
            "Additional rule: a wildcard matched against entry names, or a substring of entry paths. "
            "Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "--pattern-source",
        dest="pattern_sources",
        action="append",
        metavar="NAME",
        help=(
            "Pattern source file name to look up in the directory, in priority order. The first one disables "
            f"implicit dot-file exclusion when present. Defaults to {', '.join(DEFAULT_PATTERN_SOURCES)}."
        ),
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["both", "json", "tree"],
        default="both",
        help="Which rendering to print to stdout (default: both). Ignored with -o.",
    )
    parser.add_argument(
        "-P",
        "--permission-action",
        choices=["ignore", "warn", "fail"],
        default="ignore",
        help="How to handle inaccessible entries below the root (default: ignore).",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Text encoding of the output (default: utf-8).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory and file counts to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every excluded entry and skipped pattern source to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    try:
        codecs.lookup(args.encoding)
    except LookupError:
        raise ValueError(f"Unknown encoding: {args.encoding}")

    if args.output_dir is not None and args.output_dir.exists() and not args.output_dir.is_dir():
        raise ValueError(f"Output path is not a directory: {args.output_dir}")

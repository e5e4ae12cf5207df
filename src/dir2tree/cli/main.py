"""Command-line interface for dir2tree.

This module provides the command-line interface for dir2tree. It is a thin
caller of the library: it picks the directory and options, lets
:class:`~dir2tree.dir2tree.Dir2Tree` build the complete tree, and only then
prints or writes the renderings.

Exit Codes:
    0: Successful completion
    1: Runtime error during execution (missing root, excluded root, unreadable pattern source, ...)
    2: Command-line syntax error
    126: Permission denied
    141: Broken pipe (output closed early, e.g. when piping to `head`)

Example:
    # Print both renderings
    $ dir2tree /path/to/dir

    # Write the two artifacts to a directory
    $ dir2tree /path/to/dir -o out/
"""

import logging
import os
import sys
from typing import Optional, Sequence

from dir2tree.cli.argparser import create_parser, validate_args
from dir2tree.cli.safe_writer import SafeWriter
from dir2tree.dir2tree import Dir2Tree
from dir2tree.exclusion_rules.pattern_rules import DEFAULT_PATTERN_SOURCES
from dir2tree.file_system_tree.permission_action import PermissionAction

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbose: bool, permission_action: str) -> None:
    """Send library log records to stderr.

    Levels are set on every call, so repeated in-process runs don't inherit the
    previous run's settings.

    Args:
        verbose: Show debug records (every exclusion, skipped pattern sources).
        permission_action: CLI permission action. With "ignore", warnings about
            skipped entries are silenced unless verbose is set.
    """
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(logging.DEBUG if verbose else logging.WARNING)

    tree_logger = logging.getLogger("dir2tree.file_system_tree")
    if permission_action == "ignore" and not verbose:
        tree_logger.setLevel(logging.ERROR)
    else:
        tree_logger.setLevel(logging.NOTSET)


def format_counts(directories: int, files: int) -> str:
    """Format the entry counts into a human-readable string.

    Example:
        >>> print(format_counts(2, 5))
        Directories: 2
        Files: 5
    """
    return f"Directories: {directories}\nFiles: {files}"


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the dir2tree command-line interface.

    Args:
        argv: Arguments to parse instead of sys.argv[1:].
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        validate_args(args)
        configure_logging(args.verbose, args.permission_action)

        # Map CLI permission actions to internal enum
        perm_action = {
            "ignore": PermissionAction.IGNORE,
            "warn": PermissionAction.IGNORE,
            "fail": PermissionAction.RAISE,
        }[args.permission_action]

        analyzer = Dir2Tree(
            args.directory,
            source_names=args.pattern_sources or DEFAULT_PATTERN_SOURCES,
            extensions=args.extensions,
            extra_patterns=args.patterns,
            permission_action=perm_action,
        )

        # Build the whole tree before producing any output
        logger.debug("Built tree rooted at %s", analyzer.tree.name)

        if args.output_dir is not None:
            tree_path, glyph_path = analyzer.write_artifacts(args.output_dir, encoding=args.encoding)
            print(f"Wrote {tree_path}", file=sys.stderr)
            print(f"Wrote {glyph_path}", file=sys.stderr)
        else:
            with SafeWriter(sys.stdout.fileno(), encoding=args.encoding) as safe_writer:
                if args.format in ("both", "tree"):
                    for line in analyzer.stream_tree():
                        safe_writer.write(line + "\n")
                if args.format == "both":
                    safe_writer.write("\n")
                if args.format in ("both", "json"):
                    safe_writer.write(analyzer.to_json() + "\n")

        if args.summary:
            print(format_counts(analyzer.directory_count, analyzer.file_count), file=sys.stderr)

    except BrokenPipeError:
        # Keep the interpreter from complaining about stdout on shutdown
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(141)
    except PermissionError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(126)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()

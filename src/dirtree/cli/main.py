"""Command-line interface for dirtree.

This module provides the ``dirtree`` command, which prints the contents of a
directory as an indented tree followed by a count of directories and files. It
parses the command line into immutable settings, streams the listing through a
``SafeWriter`` and maps failures and signals to exit codes.

Exit Codes:
    0: Successful completion (including directories skipped because they could
       not be opened)
    1: Invalid settings or runtime error before or during the listing
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # List the current directory
    $ dirtree

    # Two levels deep, directories first, with sizes
    $ dirtree -L 2 --dirsfirst -h /path/to/dir
"""

import sys
from typing import List, Optional

from dirtree.cli.argparser import build_settings, create_parser, validate_args
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.exceptions import ConfigurationError
from dirtree.settings import resolve_root
from dirtree.walker import TreeWalker


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dirtree command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: Successful completion
        1: Invalid settings or runtime error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        # argparse calls sys.exit(2) for argument errors and sys.exit(0) for --help/--version
        args = parser.parse_args(argv)
        validate_args(args)

        root, used_requested = resolve_root(args.directory)
        if not used_requested:
            print(
                f"Warning: '{args.directory}' is not an accessible directory; listing {root} instead",
                file=sys.stderr,
            )

        settings = build_settings(args, root)
        walker = TreeWalker(settings)

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            try:
                for line in walker.stream_tree():
                    safe_writer.write_line(line)

                summary = walker.summary_line()
                if summary is not None:
                    safe_writer.write_line(summary)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except ConfigurationError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("Try 'dirtree --help' for more information.", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()

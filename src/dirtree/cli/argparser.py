"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree, handling argument
parsing, validation and conversion of the parsed arguments into ``TreeSettings``.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Union

from dirtree import __version__
from dirtree.entry.permission_action import PermissionAction
from dirtree.exceptions import ConfigurationError
from dirtree.settings import UNLIMITED_DEPTH, TreeSettings
from dirtree.types import PatternMode, SizeMode


class PatternAction(argparse.Action):
    """Action recording a name pattern together with its mode.

    ``-P`` and ``-I`` share one pattern slot: whichever appears last on the
    command line replaces the other, so at most one pattern is ever active.
    """

    def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Union[str, Sequence[Any], None],
        option_string: Optional[str] = None,
    ) -> None:
        if values is None:
            return
        namespace.pattern = str(values)
        if option_string == "-I":
            namespace.pattern_mode = PatternMode.EXCLUDE
        else:
            namespace.pattern_mode = PatternMode.INCLUDE


def positive_level(value: str) -> int:
    """Parse the ``-L`` argument, rejecting levels below 1."""
    try:
        level = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid level: {value!r}")
    if level < 1:
        raise argparse.ArgumentTypeError("Invalid level, must be greater than 0.")
    return level


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    ``-h`` selects human-readable sizes as in the classic ``tree`` command, so help
    is only available as ``--help``.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: list the contents of a directory as an indented tree.

    Every entry is printed on its own line below its parent directory, joined to
    its siblings by connector lines. Hidden entries are skipped unless -a is
    given, and a count of directories and files is printed at the end.
    """

    epilog = """
    Examples:
      # List the current directory
      dirtree

      # Include hidden files, directories first, two levels deep
      dirtree -a --dirsfirst -L 2 /path/to/project

      # Only entries whose name contains "log", ignoring case
      dirtree -P log --ignore-case /var

      # Everything except entries whose name contains "cache"
      dirtree -I cache /path/to/project

      # Permissions, owner and human-readable sizes, newest last
      dirtree -p -u -h -t /path/to/project

      # Warn about directories that cannot be opened
      dirtree --permission-action warn /
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )

    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=None,
        help="Directory to list (default: the current directory).",
    )

    listing = parser.add_argument_group("Listing options")
    listing.add_argument("-a", dest="show_all", action="store_true", help="All files are listed.")
    listing.add_argument("-d", dest="dirs_only", action="store_true", help="List directories only.")
    listing.add_argument("-f", dest="full_path", action="store_true", help="Print the full path prefix for each file.")
    listing.add_argument(
        "-L",
        dest="level",
        metavar="LEVEL",
        type=positive_level,
        default=UNLIMITED_DEPTH,
        help="Descend only LEVEL directories deep.",
    )
    listing.add_argument(
        "-P",
        dest="pattern",
        metavar="PATTERN",
        action=PatternAction,
        help="List only those files whose name contains PATTERN.",
    )
    listing.add_argument(
        "-I",
        dest="pattern",
        metavar="PATTERN",
        action=PatternAction,
        help="Do not list files whose name contains PATTERN.",
    )
    listing.add_argument("--ignore-case", action="store_true", help="Ignore case when pattern matching.")
    listing.add_argument(
        "--noreport",
        dest="report",
        action="store_false",
        help="Turn off file/directory count at end of tree listing.",
    )
    listing.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output to FILE instead of stdout.",
    )
    listing.add_argument(
        "--permission-action",
        choices=[action.value for action in PermissionAction],
        default=PermissionAction.IGNORE.value,
        help="How to handle directories that cannot be opened (default: ignore).",
    )

    file_options = parser.add_argument_group("File options")
    file_options.add_argument("-Q", dest="quote", action="store_true", help="Quote filenames with double quotes.")
    file_options.add_argument(
        "-p", dest="show_permissions", action="store_true", help="Print the protections for each file."
    )
    file_options.add_argument("-u", dest="show_uid", action="store_true", help="Displays file owner or UID number.")
    file_options.add_argument("-g", dest="show_gid", action="store_true", help="Displays file group owner or GID number.")
    file_options.add_argument(
        "-s",
        dest="size_mode",
        action="store_const",
        const=SizeMode.BYTES,
        default=SizeMode.OFF,
        help="Print the size in bytes of each file.",
    )
    file_options.add_argument(
        "-h",
        dest="size_mode",
        action="store_const",
        const=SizeMode.BINARY,
        help="Print the size in a more human readable way.",
    )
    file_options.add_argument(
        "--si",
        dest="size_mode",
        action="store_const",
        const=SizeMode.SI,
        help="Like -h, but use in SI units (powers of 1000).",
    )
    file_options.add_argument(
        "-D", dest="show_ctime", action="store_true", help="Print the date of the last status change."
    )
    file_options.add_argument("--inodes", dest="show_inode", action="store_true", help="Print inode number of each file.")
    file_options.add_argument(
        "--device", dest="show_device", action="store_true", help="Print device ID number to which each file belongs."
    )

    sorting = parser.add_argument_group("Sorting options")
    sorting.add_argument(
        "-v",
        dest="sort_alpha",
        action="store_const",
        const=True,
        default=True,
        help="Sort files alphanumerically (default, always on).",
    )
    sorting.add_argument("-t", dest="sort_mtime", action="store_true", help="Sort files by last modification time.")
    sorting.add_argument("-U", dest="unsorted", action="store_true", help="Leave files unsorted.")
    sorting.add_argument("-r", dest="reverse", action="store_true", help="Reverse the order of the sort.")
    sorting.add_argument(
        "--dirsfirst", dest="dirs_first", action="store_true", help="List directories before files (-U disables)."
    )

    graphics = parser.add_argument_group("Graphics options")
    graphics.add_argument("-i", dest="no_indent", action="store_true", help="Don't print indentation lines.")
    graphics.add_argument("-C", dest="color", action="store_true", help="Turn colorization on.")

    misc = parser.add_argument_group("Miscellaneous options")
    misc.add_argument("--version", action="version", version=f"dirtree {__version__}", help="Print version and exit.")
    misc.add_argument("--help", action="help", help="Print usage and this help message and exit.")

    parser.set_defaults(pattern=None, pattern_mode=PatternMode.INCLUDE)
    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ConfigurationError: If any arguments fail validation.
    """
    if args.pattern is not None and not args.pattern:
        raise ConfigurationError("pattern", "-P/-I pattern must not be empty")


def build_settings(args: argparse.Namespace, root: Path) -> TreeSettings:
    """Convert parsed arguments into listing settings.

    Args:
        args: Parsed and validated command-line arguments.
        root: Canonical root directory.

    Returns:
        The immutable settings for the listing.
    """
    return TreeSettings(
        root=root,
        show_all=args.show_all,
        dirs_only=args.dirs_only,
        no_indent=args.no_indent,
        sort_alpha=args.sort_alpha,
        sort_mtime=args.sort_mtime,
        unsorted=args.unsorted,
        reverse=args.reverse,
        dirs_first=args.dirs_first,
        report=args.report,
        pattern=args.pattern,
        pattern_mode=args.pattern_mode,
        ignore_case=args.ignore_case,
        full_path=args.full_path,
        quote=args.quote,
        color=args.color,
        max_depth=args.level,
        show_permissions=args.show_permissions,
        show_uid=args.show_uid,
        show_gid=args.show_gid,
        size_mode=args.size_mode,
        show_ctime=args.show_ctime,
        show_inode=args.show_inode,
        show_device=args.show_device,
        permission_action=PermissionAction(args.permission_action),
    )

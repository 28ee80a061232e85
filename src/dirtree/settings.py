"""Immutable listing settings.

Settings are resolved once, before traversal starts, and then passed by
reference to every component that needs them. Nothing in the package mutates a
``TreeSettings`` after construction.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from dirtree.entry.permission_action import PermissionAction
from dirtree.exceptions import ConfigurationError
from dirtree.types import PathType, PatternMode, SizeMode

UNLIMITED_DEPTH = -1


def resolve_root(directory: Optional[PathType] = None) -> Tuple[Path, bool]:
    """Canonicalize the root directory of a listing.

    Args:
        directory: The requested root. ``None`` means the current directory.

    Returns:
        A pair of the canonical root path and a flag telling whether the requested
        directory was used. When the request does not resolve to an existing
        directory the current directory is used instead and the flag is False.

    Example:
        >>> root, used = resolve_root(".")
        >>> used
        True
        >>> root == Path.cwd().resolve()
        True
    """
    if directory is not None:
        try:
            candidate = Path(directory).resolve(strict=True)
        except OSError:
            candidate = None
        if candidate is not None and candidate.is_dir():
            return candidate, True
    return Path(os.getcwd()).resolve(), directory is None


@dataclass(frozen=True)
class TreeSettings:
    """Read-only configuration of one tree listing.

    Attributes:
        root: Canonical root directory.
        show_all: List hidden entries too.
        dirs_only: List directories only.
        no_indent: Do not draw connector glyphs.
        sort_alpha: Sort siblings by name.
        sort_mtime: Sort siblings by modification time.
        unsorted: Keep directory listing order, disabling every other sort option.
        reverse: Reverse the final sibling order.
        dirs_first: Move directories before files (a later name or time sort
            still reorders across the partition).
        report: Print the trailing directory/file count.
        pattern: Substring used for name filtering, or None.
        pattern_mode: Whether ``pattern`` selects or rejects entries.
        ignore_case: Match ``pattern`` case-insensitively.
        full_path: Print each name with its path from the root's parent.
        quote: Wrap names in double quotes.
        color: Colorize directories and executables.
        max_depth: Levels to descend below the root; -1 means unlimited.
        show_permissions, show_uid, show_gid, show_ctime, show_inode, show_device:
            Attribute block columns.
        size_mode: Size column format.
        permission_action: What to do when a directory cannot be listed.
    """

    root: Path = field(default_factory=lambda: resolve_root()[0])
    show_all: bool = False
    dirs_only: bool = False
    no_indent: bool = False
    sort_alpha: bool = True
    sort_mtime: bool = False
    unsorted: bool = False
    reverse: bool = False
    dirs_first: bool = False
    report: bool = True
    pattern: Optional[str] = None
    pattern_mode: PatternMode = PatternMode.INCLUDE
    ignore_case: bool = False
    full_path: bool = False
    quote: bool = False
    color: bool = False
    max_depth: int = UNLIMITED_DEPTH
    show_permissions: bool = False
    show_uid: bool = False
    show_gid: bool = False
    size_mode: SizeMode = SizeMode.OFF
    show_ctime: bool = False
    show_inode: bool = False
    show_device: bool = False
    permission_action: PermissionAction = PermissionAction.IGNORE

    def __post_init__(self) -> None:
        if self.max_depth == 0 or self.max_depth < UNLIMITED_DEPTH:
            raise ConfigurationError("max_depth", "must be greater than 0")
        if self.pattern is not None and not self.pattern:
            raise ConfigurationError("pattern", "must not be empty")

    @property
    def root_prefix(self) -> Path:
        """Directory that full-path names are shown relative to (the root's parent)."""
        return self.root.parent

    @property
    def needs_attributes(self) -> bool:
        """Whether any attribute column is enabled."""
        return (
            self.show_permissions
            or self.show_uid
            or self.show_gid
            or self.size_mode is not SizeMode.OFF
            or self.show_ctime
            or self.show_inode
            or self.show_device
        )

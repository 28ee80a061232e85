"""Entry representation for nodes encountered while walking a directory tree."""

import os
import stat
import time
import unicodedata
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from dirtree.types import PathType

if TYPE_CHECKING:
    from dirtree.settings import TreeSettings

ESCAPES = {"\0": "\\0", "\t": "\\t", "\r": "\\r", "\n": "\\n", "\\": "\\\\", '"': '\\"'}


def quote_name(name: str) -> str:
    r"""Wrap a name in double quotes, escaping it so the result stays on one line.

    Quotes, backslashes and the common control characters get their backslash
    escapes; any other non-printable character is written as ``\u{hex}``.

    Example:
        >>> print(quote_name('a "b"\tc'))
        "a \"b\"\tc"
        >>> print(quote_name("bell\x07"))
        "bell\u{7}"
    """
    parts = ['"']
    for char in name:
        if char in ESCAPES:
            parts.append(ESCAPES[char])
        elif unicodedata.category(char) in ("Cc", "Cf", "Cs", "Co", "Cn", "Zl", "Zp"):
            parts.append(f"\\u{{{ord(char):x}}}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


class Entry:
    """One file or directory found while walking a directory tree.

    An entry records what is needed to filter, order and name the node. Its
    metadata is deliberately not cached: ``get_metadata()`` stats the live
    filesystem on every call, so attribute display and time-based ordering always
    reflect the current state of the file at the cost of repeated ``lstat`` calls.

    A *placeholder* entry stands in for a path that could not be stat'ed, which
    happens when a file disappears between a directory listing and the stat of
    that file. Placeholders are never visible and never directories; the entry
    filter always drops them.

    Symbolic links are not followed: a link to a directory is a file entry.

    Attributes:
        path (Path): Absolute path of the node.
        name (str): Basename, or "/" for a path without one.
        relative_path (Path): Path relative to the listing root's parent.
        is_dir (bool): True for directories.
        is_hidden (bool): True when the name starts with a dot.
        is_empty (bool): True for placeholder entries.

    Example:
        >>> import tempfile
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     entry = Entry.from_path(tmpdir)
        ...     entry.is_dir, entry.is_empty
        (True, False)
        >>> Entry.placeholder("/gone").is_empty
        True
    """

    def __init__(
        self,
        path: PathType,
        *,
        is_dir: bool,
        root_prefix: Optional[PathType] = None,
        is_empty: bool = False,
    ) -> None:
        """Initialize an Entry.

        Prefer ``from_path`` and ``placeholder``, which determine ``is_dir`` from
        the filesystem.

        Args:
            path: Absolute path of the node.
            is_dir: Whether the node is a directory.
            root_prefix: Directory that ``relative_path`` is computed against.
                Defaults to the parent of ``path``.
            is_empty: Whether this is a placeholder for a path that failed to stat.
        """
        self._path = Path(path)
        self._name = self._path.name or "/"
        self._is_dir = is_dir and not is_empty
        self._is_empty = is_empty
        self._root_prefix = Path(root_prefix) if root_prefix is not None else self._path.parent
        try:
            self._relative_path = self._path.relative_to(self._root_prefix)
        except ValueError:
            self._relative_path = Path(self._name)
        if self._relative_path == Path("."):
            self._relative_path = Path(self._name)

    @classmethod
    def from_path(cls, path: PathType, root_prefix: Optional[PathType] = None) -> "Entry":
        """Create an entry by stat'ing ``path``.

        Args:
            path: Path to stat.
            root_prefix: Directory that ``relative_path`` is computed against.

        Returns:
            An entry for the node, or a placeholder when the path can no longer be
            stat'ed.
        """
        try:
            mode = os.lstat(path).st_mode
        except OSError:
            return cls.placeholder(path)
        return cls(path, is_dir=stat.S_ISDIR(mode), root_prefix=root_prefix)

    @classmethod
    def placeholder(cls, path: PathType) -> "Entry":
        """Create a placeholder entry for a path that failed to stat."""
        return cls(path, is_dir=False, is_empty=True)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._name

    @property
    def relative_path(self) -> Path:
        return self._relative_path

    @property
    def root_prefix(self) -> Path:
        return self._root_prefix

    @property
    def is_dir(self) -> bool:
        return self._is_dir

    @property
    def is_empty(self) -> bool:
        return self._is_empty

    @property
    def is_hidden(self) -> bool:
        # A name without a first character is treated as not hidden.
        return not self._is_empty and self._path.name.startswith(".")

    @property
    def is_visible(self) -> bool:
        return not self._is_empty and not self.is_hidden

    def get_metadata(self) -> os.stat_result:
        """Stat the node again and return the fresh result.

        Returns:
            The ``lstat`` result for the node.

        Raises:
            OSError: If the node cannot be stat'ed (including placeholders).
        """
        if self._is_empty:
            raise FileNotFoundError(f"No metadata for placeholder entry: {self._path}")
        return os.lstat(self._path)

    def modified_time(self) -> float:
        """Modification time of the node, or the current time when it cannot be read."""
        try:
            return self.get_metadata().st_mtime
        except OSError:
            return time.time()

    def is_executable(self) -> bool:
        """Whether any execute bit is set on a non-directory node."""
        if self._is_dir:
            return False
        try:
            return bool(self.get_metadata().st_mode & 0o111)
        except OSError:
            return False

    def list_children(self) -> List["Entry"]:
        """List the immediate children of this directory.

        Children are returned unfiltered and in directory listing order. A child that
        vanishes between the listing and its stat becomes a placeholder.

        Returns:
            Entries for all children, sharing this entry's root prefix.

        Raises:
            NotADirectoryError: If this entry is not a directory.
            PermissionError: If the directory cannot be read.
            OSError: For any other listing failure.
        """
        if not self._is_dir:
            raise NotADirectoryError(f"Cannot list children of a non-directory: {self._path}")

        with os.scandir(self._path) as it:
            names = [dir_entry.name for dir_entry in it]
        return [Entry.from_path(self._path / name, self._root_prefix) for name in names]

    def render_name(self, settings: "TreeSettings") -> str:
        """Name to display for this entry.

        Args:
            settings: Listing settings; ``full_path`` and ``quote`` are honored.

        Returns:
            The basename, or the path relative to the root's parent when full paths
            are requested, optionally wrapped in double quotes.
        """
        name = str(self._relative_path) if settings.full_path else self._name
        if settings.quote:
            return quote_name(name)
        return name

    def __repr__(self) -> str:
        kind = "placeholder" if self._is_empty else ("dir" if self._is_dir else "file")
        return f"Entry({str(self._path)!r}, {kind})"

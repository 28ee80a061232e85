"""Connector prefix drawn in front of every row of a tree listing.

The prefix is a stack of four-column segments, one per ancestor level, that is
updated incrementally as the walker moves between siblings and in and out of
directories. While a directory is open the stack holds one extra segment: the
provisional branch glyph for that directory's next child.

Example:
    >>> prefix = Prefix()
    >>> prefix.set_root_marker(LEAF)
    >>> prefix.enter_sibling(True, False, False)
    >>> prefix.render()
    '├── '
    >>> prefix.enter_sibling(False, True, False)
    >>> prefix.render()
    '└── '
"""

from enum import Enum
from typing import List

TAB = "    "
LEAF = "├── "
END_LEAF = "└── "
SUB_DIR_TAB = "│   "


class PrefixMode(Enum):
    """Drawing mode of a Prefix, fixed at construction.

    Attributes:
        FILE_TREE: Draw connector glyphs.
        NO_INDENTATION: Draw nothing; every operation is a no-op.
    """

    FILE_TREE = "file_tree"
    NO_INDENTATION = "no_indentation"


class Prefix:
    """Depth-indexed connector state for a tree listing.

    Every ``enter_sibling(..., is_directory=True)`` must be matched by exactly one
    ``leave_directory(..., is_directory=True)`` once the directory's subtree has been
    rendered, even when that subtree turned out to be empty, unreadable or filtered
    away entirely.

    Attributes:
        mode (PrefixMode): Drawing mode.
    """

    def __init__(self, mode: PrefixMode = PrefixMode.FILE_TREE) -> None:
        self.mode = mode
        self._segments: List[str] = []

    @classmethod
    def for_indentation(cls, no_indent: bool) -> "Prefix":
        """Create a prefix for the ``no_indent`` setting."""
        return cls(PrefixMode.NO_INDENTATION if no_indent else PrefixMode.FILE_TREE)

    @property
    def depth(self) -> int:
        """Number of segments currently on the stack."""
        return len(self._segments)

    def initialize(self) -> None:
        self._segments.clear()

    def set_root_marker(self, marker: str) -> None:
        """Push the first segment, used once for the children of the root."""
        if self.mode is PrefixMode.NO_INDENTATION:
            return
        self._segments.append(marker)

    def enter_sibling(self, is_first: bool, is_last: bool, is_directory: bool) -> None:
        """Update the prefix for the next sibling.

        For a row (``is_directory`` False) only the trailing branch glyph changes: it
        becomes an end branch for the last sibling and a mid branch for the first one.
        Interior siblings reuse the glyph already in place.

        For a directory (``is_directory`` True), called after the directory's own row
        has been rendered, the trailing branch is replaced by a continuation pad for
        the directory's level followed by a provisional branch for its first child.

        Args:
            is_first: Whether this is the first of its siblings.
            is_last: Whether this is the last of its siblings.
            is_directory: Whether to open a directory level.
        """
        if self.mode is PrefixMode.NO_INDENTATION:
            return

        if is_directory:
            self._pop()
            if is_last:
                self._segments.append(TAB)
                self._segments.append(END_LEAF)
            else:
                self._segments.append(SUB_DIR_TAB)
                self._segments.append(LEAF)
        elif is_last:
            self._pop()
            self._segments.append(END_LEAF)
        elif is_first:
            self._pop()
            self._segments.append(LEAF)

    def leave_directory(self, next_is_last: bool, is_directory: bool) -> None:
        """Close a directory level opened by ``enter_sibling``.

        Args:
            next_is_last: Whether the directory's next sibling is the last one.
            is_directory: Whether a directory level is being closed; files have no
                level to close.
        """
        if self.mode is PrefixMode.NO_INDENTATION or not is_directory:
            return

        self._pop()
        self._pop()
        self._segments.append(END_LEAF if next_is_last else LEAF)

    def render(self) -> str:
        return "".join(self._segments)

    def _pop(self) -> None:
        if self._segments:
            self._segments.pop()

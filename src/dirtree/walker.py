"""Recursive directory walker that produces the rows of a tree listing.

The walker lists each directory, filters and orders the children, and for every
surviving child updates the connector prefix, renders the row, tallies it and, for
directories, recurses. Rows are produced lazily, one string per entry, in the order
they must be printed: parents before children, siblings in sorted order.
"""

import sys
from pathlib import Path
from typing import Iterator, List, Optional, TextIO

from dirtree.counter import Counter
from dirtree.entry.entry import Entry
from dirtree.entry.filters import filter_entries
from dirtree.entry.permission_action import PermissionAction
from dirtree.entry.sorting import sort_entries
from dirtree.prefix import LEAF, Prefix
from dirtree.rendering.renderer import EntryRenderer
from dirtree.settings import TreeSettings


class TreeWalker:
    """Depth-first walk of a directory tree, rendering one row per entry.

    A walker is meant for a single listing: the counter keeps accumulating if the
    tree is streamed again.

    Directories that cannot be listed do not abort the walk. Their row is printed,
    their subtree is skipped, and the path is recorded in ``skipped_directories``;
    with ``PermissionAction.WARN`` a warning is also written to the error stream.

    Attributes:
        settings (TreeSettings): Listing settings.
        renderer (EntryRenderer): Formats a row from the prefix and an entry.
        prefix (Prefix): Connector state shared across the recursion.
        counter (Counter): Tally of printed directories and files.
        skipped_directories (List[Path]): Directories whose listing failed.

    Example:
        >>> import tempfile, os
        >>> with tempfile.TemporaryDirectory() as tmpdir:
        ...     os.mkdir(os.path.join(tmpdir, "docs"))
        ...     open(os.path.join(tmpdir, "docs", "index.md"), "w").close()
        ...     open(os.path.join(tmpdir, "setup.cfg"), "w").close()
        ...     walker = TreeWalker(TreeSettings(root=Path(tmpdir)))
        ...     rows = list(walker.stream_tree())
        >>> print("\\n".join(rows[1:]))
        ├── docs
        │   └── index.md
        └── setup.cfg
        >>> walker.summary_line()
        '\\n1 directories, 2 files'
    """

    def __init__(
        self,
        settings: TreeSettings,
        renderer: Optional[EntryRenderer] = None,
        prefix: Optional[Prefix] = None,
        counter: Optional[Counter] = None,
        error_stream: Optional[TextIO] = None,
    ) -> None:
        """Initialize a TreeWalker.

        Args:
            settings: Listing settings.
            renderer: Row formatter. Defaults to an ``EntryRenderer`` for the settings.
            prefix: Connector state. Defaults to one matching ``settings.no_indent``.
            counter: Tally to update. Defaults to a fresh ``Counter``.
            error_stream: Where WARN-mode warnings go. Defaults to ``sys.stderr``.
        """
        self.settings = settings
        self.renderer = renderer if renderer is not None else EntryRenderer(settings)
        self.prefix = prefix if prefix is not None else Prefix.for_indentation(settings.no_indent)
        self.counter = counter if counter is not None else Counter()
        self.skipped_directories: List[Path] = []
        self._error_stream = error_stream

    def stream_tree(self) -> Iterator[str]:
        """Generate the listing of the configured root one row at a time.

        Yields:
            Rendered rows without trailing newlines, root first.
        """
        root_entry = Entry.from_path(self.settings.root, self.settings.root_prefix)
        self.prefix.initialize()
        yield from self.render_root(root_entry)

    def render_root(self, root_entry: Entry) -> Iterator[str]:
        """Render the root row, then the root's subtree."""
        yield self.renderer.render_line(self.prefix.render(), root_entry)
        self.prefix.set_root_marker(LEAF)
        yield from self.render_subdir(root_entry, self.settings.max_depth)

    def render_subdir(self, directory: Entry, depth_budget: int) -> Iterator[str]:
        """Render the children of ``directory``, recursing into subdirectories.

        Args:
            directory: Directory entry whose children are rendered.
            depth_budget: Levels still allowed below ``directory``; 0 stops the
                descent and -1 is unlimited.

        Yields:
            One rendered row per surviving descendant.

        Raises:
            NotADirectoryError: If ``directory`` is not a directory.
        """
        if not directory.is_dir:
            raise NotADirectoryError(f"Cannot render children of a non-directory: {directory.path}")
        if depth_budget == 0:
            return

        try:
            children = directory.list_children()
        except OSError as e:
            # Includes a directory replaced by a file since it was stat'ed.
            self._skip(directory, e)
            return

        children = sort_entries(filter_entries(children, self.settings), self.settings)
        sibling_count = len(children)
        next_budget = depth_budget - 1 if depth_budget > 0 else depth_budget

        for position, child in enumerate(children, start=1):
            is_last = position == sibling_count
            self.prefix.enter_sibling(position == 1, is_last, False)
            yield self.renderer.render_line(self.prefix.render(), child)
            self.counter.tally(child.is_dir)

            if child.is_dir:
                self.prefix.enter_sibling(False, is_last, True)
                yield from self.render_subdir(child, next_budget)
                self.prefix.leave_directory(position + 1 == sibling_count, True)

    def summary_line(self) -> Optional[str]:
        """The trailing count line, or None when reporting is disabled."""
        if not self.settings.report:
            return None
        directories, files = self.counter.summary()
        return f"\n{directories} directories, {files} files"

    def get_tree_representation(self) -> str:
        """Render the complete listing, including the summary, as one string."""
        lines = list(self.stream_tree())
        summary = self.summary_line()
        if summary is not None:
            lines.append(summary)
        return "\n".join(lines)

    def _skip(self, directory: Entry, error: OSError) -> None:
        self.skipped_directories.append(directory.path)
        if self.settings.permission_action is PermissionAction.WARN:
            stream = self._error_stream if self._error_stream is not None else sys.stderr
            reason = error.strerror or str(error)
            print(f"Warning: cannot open directory {directory.path}: {reason}", file=stream)

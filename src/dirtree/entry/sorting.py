"""Ordering of sibling entries.

Sorting is a chain of independent stable passes over the same list, run in a fixed
order: directories first, then by name, then by modification time, then reversal.
Each pass reorders everything the previous passes established except where it
considers two entries equal, so the last enabled pass decides the order and the
earlier ones only break its ties. With the default name sort enabled, for example,
``dirs_first`` only matters between entries with equal names.
"""

from typing import TYPE_CHECKING, List, Sequence, Tuple

from dirtree.entry.entry import Entry

if TYPE_CHECKING:
    from dirtree.settings import TreeSettings


def name_key(name: str) -> Tuple[str, str]:
    """Sort key for names: letters compare ignoring case, lowercase first on ties.

    Example:
        >>> sorted(["b", "a", "B"], key=name_key)
        ['a', 'b', 'B']
    """
    return name.casefold(), name.swapcase()


def directories_first(entries: Sequence[Entry]) -> List[Entry]:
    """Stable partition with directories before files."""
    return sorted(entries, key=lambda entry: not entry.is_dir)


def by_name(entries: Sequence[Entry]) -> List[Entry]:
    """Stable sort by basename."""
    return sorted(entries, key=lambda entry: name_key(entry.name))


def by_modified_time(entries: Sequence[Entry]) -> List[Entry]:
    """Stable sort by modification time, oldest first.

    An unreadable timestamp counts as the current time.
    """
    return sorted(entries, key=lambda entry: entry.modified_time())


def sort_entries(entries: Sequence[Entry], settings: "TreeSettings") -> List[Entry]:
    """Order sibling entries according to the settings.

    Args:
        entries: Filtered siblings in directory listing order.
        settings: Listing settings.

    Returns:
        A new list; ``entries`` itself is not modified.
    """
    ordered = list(entries)
    if settings.unsorted:
        return ordered

    if settings.dirs_first:
        ordered = directories_first(ordered)
    if settings.sort_alpha:
        ordered = by_name(ordered)
    if settings.sort_mtime:
        ordered = by_modified_time(ordered)
    if settings.reverse:
        ordered.reverse()

    return ordered

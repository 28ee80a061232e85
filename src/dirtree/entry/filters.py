"""Visibility and pattern filtering of sibling entries."""

from typing import TYPE_CHECKING, Iterable, List

from dirtree.entry.entry import Entry
from dirtree.types import PatternMode

if TYPE_CHECKING:
    from dirtree.settings import TreeSettings


def matches_pattern(entry: Entry, settings: "TreeSettings") -> bool:
    """Check an entry against the configured name pattern.

    The pattern is a plain substring, matched against the entry's basename. With an
    include pattern only matching names pass; with an exclude pattern matching names
    are rejected. Entries always pass when no pattern is configured.

    Example:
        >>> from dirtree.settings import TreeSettings
        >>> settings = TreeSettings(pattern="log", pattern_mode=PatternMode.EXCLUDE)
        >>> matches_pattern(Entry("/tmp/app.log", is_dir=False), settings)
        False
    """
    if settings.pattern is None:
        return True

    name = entry.name
    pattern = settings.pattern
    if settings.ignore_case:
        name = name.lower()
        pattern = pattern.lower()

    found = pattern in name
    if settings.pattern_mode is PatternMode.EXCLUDE:
        return not found
    return found


def keep_entry(entry: Entry, settings: "TreeSettings") -> bool:
    """Decide whether a single entry survives filtering."""
    if entry.is_empty:
        return False
    if entry.is_hidden and not settings.show_all:
        return False
    if settings.dirs_only and not entry.is_dir:
        return False
    return matches_pattern(entry, settings)


def filter_entries(entries: Iterable[Entry], settings: "TreeSettings") -> List[Entry]:
    """Drop placeholders and every entry the settings hide, preserving order."""
    return [entry for entry in entries if keep_entry(entry, settings)]

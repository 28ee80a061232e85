"""Entries of a directory listing and the filtering and ordering of siblings."""

from .entry import Entry
from .filters import filter_entries, keep_entry, matches_pattern
from .permission_action import PermissionAction
from .sorting import sort_entries

__all__ = [
    "Entry",
    "PermissionAction",
    "filter_entries",
    "keep_entry",
    "matches_pattern",
    "sort_entries",
]

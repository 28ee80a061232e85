"""Attribute block printed in front of entry names.

The block holds the columns selected in the settings, in a fixed order:
permissions, owner, group, size, change time, inode and device. Values are read
from a fresh stat of the entry each time a block is formatted.
"""

import grp
import os
import pwd
import stat
import time
from typing import TYPE_CHECKING, List, Optional

from humanfriendly import format_size

from dirtree.entry.entry import Entry
from dirtree.types import SizeMode

if TYPE_CHECKING:
    from dirtree.settings import TreeSettings

UNKNOWN = "?"
TIME_FORMAT = "%b %d %H:%M"


def owner_name(uid: int) -> str:
    """User name for ``uid``, or the number itself when it has no passwd entry."""
    try:
        return pwd.getpwuid(uid).pw_name
    except KeyError:
        return str(uid)


def group_name(gid: int) -> str:
    """Group name for ``gid``, or the number itself when it has no group entry."""
    try:
        return grp.getgrgid(gid).gr_name
    except KeyError:
        return str(gid)


def format_entry_size(size: int, mode: SizeMode) -> str:
    """Format a byte count for the size column.

    Example:
        >>> format_entry_size(1024, SizeMode.BYTES)
        '       1024'
        >>> format_entry_size(2048, SizeMode.BINARY).strip()
        '2 KiB'
        >>> format_entry_size(2000, SizeMode.SI).strip()
        '2 KB'
    """
    if mode is SizeMode.BINARY:
        return format_size(size, binary=True).rjust(10)
    if mode is SizeMode.SI:
        return format_size(size).rjust(10)
    return str(size).rjust(11)


def attribute_columns(metadata: Optional[os.stat_result], settings: "TreeSettings") -> List[str]:
    """Build the enabled columns from stat data; unreadable metadata gives '?' columns."""
    columns: List[str] = []

    if settings.show_permissions:
        columns.append(stat.filemode(metadata.st_mode) if metadata else UNKNOWN)
    if settings.show_uid:
        columns.append(owner_name(metadata.st_uid).ljust(8) if metadata else UNKNOWN)
    if settings.show_gid:
        columns.append(group_name(metadata.st_gid).ljust(8) if metadata else UNKNOWN)
    if settings.size_mode is not SizeMode.OFF:
        columns.append(format_entry_size(metadata.st_size, settings.size_mode) if metadata else UNKNOWN)
    if settings.show_ctime:
        columns.append(time.strftime(TIME_FORMAT, time.localtime(metadata.st_ctime)) if metadata else UNKNOWN)
    if settings.show_inode:
        columns.append(str(metadata.st_ino).rjust(9) if metadata else UNKNOWN)
    if settings.show_device:
        columns.append(str(metadata.st_dev).rjust(5) if metadata else UNKNOWN)

    return columns


def format_attributes(entry: Entry, settings: "TreeSettings") -> Optional[str]:
    """Format the bracketed attribute block for an entry.

    Returns:
        ``"[...]"`` with the enabled columns, or None when no column is enabled.
    """
    if not settings.needs_attributes:
        return None

    try:
        metadata: Optional[os.stat_result] = entry.get_metadata()
    except OSError:
        metadata = None

    return "[" + " ".join(attribute_columns(metadata, settings)) + "]"

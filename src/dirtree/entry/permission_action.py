"""Permission action enum for handling unreadable directories during traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during traversal.

    Neither action aborts the listing: the directory row is still printed and
    only its subtree is skipped.

    Values:
        IGNORE: Skip the subtree silently (default behavior)
        WARN: Skip the subtree and print a warning on the error stream
    """

    IGNORE = "ignore"
    WARN = "warn"

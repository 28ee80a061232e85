"""Directory tree listing utilities.

This package renders a directory subtree as a connected listing in the style
of the classic ``tree`` command, with optional per-entry attributes.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"

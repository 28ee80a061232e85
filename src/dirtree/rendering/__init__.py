"""Row formatting for tree listings: attribute blocks, colors and names."""

from .attributes import format_attributes
from .colors import colorize
from .renderer import EntryRenderer

__all__ = ["EntryRenderer", "colorize", "format_attributes"]

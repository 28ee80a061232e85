"""Formatting of a single row of a tree listing."""

from dirtree.entry.entry import Entry
from dirtree.rendering.attributes import format_attributes
from dirtree.rendering.colors import colorize
from dirtree.settings import TreeSettings


class EntryRenderer:
    """Turns a connector prefix and an entry into one output row.

    A row is laid out as ``<prefix>[<attributes>] <name>``, where the attribute
    block appears only when an attribute column is enabled and the name is wrapped
    in an ANSI color only when color output is on.

    Attributes:
        settings (TreeSettings): Listing settings.

    Example:
        >>> renderer = EntryRenderer(TreeSettings(quote=True))
        >>> renderer.render_line("└── ", Entry("/srv/notes.txt", is_dir=False))
        '└── "notes.txt"'
    """

    def __init__(self, settings: TreeSettings) -> None:
        self.settings = settings

    def render_line(self, prefix: str, entry: Entry) -> str:
        parts = [prefix]

        attributes = format_attributes(entry, self.settings)
        if attributes is not None:
            parts.append(attributes + " ")

        name = entry.render_name(self.settings)
        if self.settings.color:
            name = colorize(name, entry)
        parts.append(name)

        return "".join(parts)

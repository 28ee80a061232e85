"""ANSI colors for entry names."""

from typing import Optional

from dirtree.entry.entry import Entry

DIRECTORY_COLOR = "\033[1;34m"
EXECUTABLE_COLOR = "\033[1;32m"
RESET = "\033[0m"


def color_for(entry: Entry) -> Optional[str]:
    """Escape sequence for an entry's name: blue for directories, green for executables."""
    if entry.is_dir:
        return DIRECTORY_COLOR
    if entry.is_executable():
        return EXECUTABLE_COLOR
    return None


def colorize(text: str, entry: Entry) -> str:
    """Wrap ``text`` in the entry's color, or return it unchanged for plain files."""
    color = color_for(entry)
    if color is None:
        return text
    return f"{color}{text}{RESET}"

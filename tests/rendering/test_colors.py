"""Unit tests for name colors."""

from dirtree.entry.entry import Entry
from dirtree.rendering.colors import DIRECTORY_COLOR, EXECUTABLE_COLOR, RESET, color_for, colorize


def test_directory_color(tmp_path):
    entry = Entry.from_path(tmp_path)
    assert color_for(entry) == DIRECTORY_COLOR
    assert colorize("src", entry) == f"{DIRECTORY_COLOR}src{RESET}"


def test_executable_color(tmp_path):
    script = tmp_path / "build.sh"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    assert colorize("build.sh", Entry.from_path(script)) == f"{EXECUTABLE_COLOR}build.sh{RESET}"


def test_plain_file_is_uncolored(tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("")
    path.chmod(0o644)
    entry = Entry.from_path(path)
    assert color_for(entry) is None
    assert colorize("notes.txt", entry) == "notes.txt"

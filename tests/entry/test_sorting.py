"""Unit tests for sibling ordering."""

import os

from dirtree.entry.entry import Entry
from dirtree.entry.sorting import by_name, directories_first, name_key, sort_entries
from dirtree.settings import TreeSettings


def names(entries):
    return [entry.name for entry in entries]


def make_entries(tmp_path, specs):
    """Build entries from (name, is_dir) pairs without touching the filesystem."""
    return [Entry(tmp_path / name, is_dir=is_dir) for name, is_dir in specs]


def test_name_sort_case_ordering(tmp_path):
    entries = make_entries(tmp_path, [("b", False), ("a", False), ("B", False)])
    assert names(sort_entries(entries, TreeSettings(root=tmp_path))) == ["a", "b", "B"]


def test_name_sort_reversed(tmp_path):
    entries = make_entries(tmp_path, [("b", False), ("a", False), ("B", False)])
    settings = TreeSettings(root=tmp_path, reverse=True)
    assert names(sort_entries(entries, settings)) == ["B", "b", "a"]


def test_name_key_orders_dotfiles_first():
    assert sorted(["main.py", ".gitignore", "README"], key=name_key) == [".gitignore", "main.py", "README"]


def test_dirs_first_with_name_sort(tmp_path):
    entries = make_entries(tmp_path, [("z", False), ("a", True)])
    settings = TreeSettings(root=tmp_path, dirs_first=True)
    result = sort_entries(entries, settings)
    assert names(result) == ["a", "z"]
    assert result[0].is_dir


def test_dirs_first_partition_is_stable(tmp_path):
    entries = make_entries(tmp_path, [("x", False), ("y", True), ("a", False), ("b", True)])
    assert names(directories_first(entries)) == ["y", "b", "x", "a"]


def test_dirs_first_without_name_sort(tmp_path):
    entries = make_entries(tmp_path, [("x", False), ("y", True), ("a", False)])
    settings = TreeSettings(root=tmp_path, dirs_first=True, sort_alpha=False)
    assert names(sort_entries(entries, settings)) == ["y", "x", "a"]


def test_name_pass_runs_after_directory_partition(tmp_path):
    # Passes are applied in order, so the name sort reorders across the partition.
    entries = make_entries(tmp_path, [("b", True), ("a", False)])
    settings = TreeSettings(root=tmp_path, dirs_first=True)
    assert names(sort_entries(entries, settings)) == ["a", "b"]


def test_by_name_is_stable_for_equal_names(tmp_path):
    first = Entry(tmp_path / "one" / "same", is_dir=True)
    second = Entry(tmp_path / "two" / "same", is_dir=False)
    assert by_name([first, second]) == [first, second]


def test_unsorted_keeps_listing_order(tmp_path):
    entries = make_entries(tmp_path, [("c", False), ("a", True), ("b", False)])
    settings = TreeSettings(root=tmp_path, unsorted=True, reverse=True, dirs_first=True)
    assert names(sort_entries(entries, settings)) == ["c", "a", "b"]


def test_sort_does_not_modify_input(tmp_path):
    entries = make_entries(tmp_path, [("b", False), ("a", False)])
    sort_entries(entries, TreeSettings(root=tmp_path))
    assert names(entries) == ["b", "a"]


def test_mtime_sort_dominates_name_sort(tmp_path):
    for name, mtime in [("a.txt", 300), ("b.txt", 100), ("c.txt", 200)]:
        path = tmp_path / name
        path.write_text("")
        os.utime(path, (mtime, mtime))
    entries = [Entry.from_path(tmp_path / name) for name in ["a.txt", "b.txt", "c.txt"]]

    settings = TreeSettings(root=tmp_path, sort_mtime=True)
    assert names(sort_entries(entries, settings)) == ["b.txt", "c.txt", "a.txt"]

    settings = TreeSettings(root=tmp_path, sort_mtime=True, reverse=True)
    assert names(sort_entries(entries, settings)) == ["a.txt", "c.txt", "b.txt"]


def test_mtime_ties_keep_name_order(tmp_path):
    for name in ["b.txt", "a.txt"]:
        path = tmp_path / name
        path.write_text("")
        os.utime(path, (500, 500))
    entries = [Entry.from_path(tmp_path / name) for name in ["b.txt", "a.txt"]]

    settings = TreeSettings(root=tmp_path, sort_mtime=True)
    assert names(sort_entries(entries, settings)) == ["a.txt", "b.txt"]


def test_unreadable_mtime_sorts_last(tmp_path):
    old = tmp_path / "old.txt"
    old.write_text("")
    os.utime(old, (1000, 1000))
    unreadable = Entry(tmp_path / "missing.txt", is_dir=False)
    entries = [unreadable, Entry.from_path(old)]

    settings = TreeSettings(root=tmp_path, sort_mtime=True, sort_alpha=False)
    assert names(sort_entries(entries, settings)) == ["old.txt", "missing.txt"]

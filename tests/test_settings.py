"""Unit tests for listing settings."""

import dataclasses
from pathlib import Path

import pytest

from dirtree.entry.permission_action import PermissionAction
from dirtree.exceptions import ConfigurationError
from dirtree.settings import UNLIMITED_DEPTH, TreeSettings, resolve_root
from dirtree.types import PatternMode, SizeMode


def test_defaults(tmp_path):
    settings = TreeSettings(root=tmp_path)

    assert settings.sort_alpha
    assert settings.report
    assert not settings.show_all
    assert settings.max_depth == UNLIMITED_DEPTH
    assert settings.pattern is None
    assert settings.pattern_mode is PatternMode.INCLUDE
    assert settings.size_mode is SizeMode.OFF
    assert settings.permission_action is PermissionAction.IGNORE
    assert not settings.needs_attributes


def test_settings_are_immutable(tmp_path):
    settings = TreeSettings(root=tmp_path)
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.show_all = True


@pytest.mark.parametrize("depth", [0, -2])
def test_invalid_depth(tmp_path, depth):
    with pytest.raises(ConfigurationError, match="max_depth"):
        TreeSettings(root=tmp_path, max_depth=depth)


def test_empty_pattern_rejected(tmp_path):
    with pytest.raises(ConfigurationError, match="pattern"):
        TreeSettings(root=tmp_path, pattern="")


def test_root_prefix(tmp_path):
    assert TreeSettings(root=tmp_path / "project").root_prefix == tmp_path


def test_root_prefix_of_filesystem_root():
    assert TreeSettings(root=Path("/")).root_prefix == Path("/")


@pytest.mark.parametrize(
    "overrides",
    [
        {"show_permissions": True},
        {"show_uid": True},
        {"show_gid": True},
        {"size_mode": SizeMode.SI},
        {"show_ctime": True},
        {"show_inode": True},
        {"show_device": True},
    ],
)
def test_needs_attributes(tmp_path, overrides):
    assert TreeSettings(root=tmp_path, **overrides).needs_attributes


def test_resolve_root_existing_directory(tmp_path):
    root, used = resolve_root(tmp_path)
    assert root == tmp_path.resolve()
    assert used


def test_resolve_root_is_canonical(tmp_path):
    (tmp_path / "a").mkdir()
    root, used = resolve_root(tmp_path / "a" / ".." / "a")
    assert root == (tmp_path / "a").resolve()
    assert used


def test_resolve_root_missing_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root, used = resolve_root(tmp_path / "does-not-exist")
    assert root == tmp_path.resolve()
    assert not used


def test_resolve_root_file_falls_back_to_cwd(tmp_path, monkeypatch):
    (tmp_path / "file.txt").write_text("")
    monkeypatch.chdir(tmp_path)
    root, used = resolve_root(tmp_path / "file.txt")
    assert root == tmp_path.resolve()
    assert not used


def test_resolve_root_default_is_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root, used = resolve_root()
    assert root == tmp_path.resolve()
    assert used

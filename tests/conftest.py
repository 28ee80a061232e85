"""Test configuration and fixtures for dirtree."""

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small project tree.

    Layout:
        alpha/one.txt
        alpha/two.txt
        beta/gamma/deep.txt
        .hidden
        zeta.txt
    """
    root = tmp_path / "project"
    (root / "alpha").mkdir(parents=True)
    (root / "alpha" / "one.txt").write_text("one")
    (root / "alpha" / "two.txt").write_text("two")
    (root / "beta" / "gamma").mkdir(parents=True)
    (root / "beta" / "gamma" / "deep.txt").write_text("deep")
    (root / ".hidden").write_text("secret")
    (root / "zeta.txt").write_text("zeta")
    return root

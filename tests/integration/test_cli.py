"""Integration tests for the command-line interface.

These run the installed ``dirtree`` module in a subprocess and cover:
- Default listing and summary
- Depth limits and pattern filtering
- Output to a file
- Exit codes for bad arguments
- Broken pipes
"""

import subprocess
import sys
from pathlib import Path

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(*args, **kwargs):
    return subprocess.run(
        [sys.executable, "-m", "dirtree.cli.main", *map(str, args)],
        capture_output=True,
        text=True,
        encoding="utf-8",
        **kwargs,
    )


@pytest.fixture
def temp_project(tmp_path):
    """Create a temporary project directory with test files."""
    base_dir = tmp_path / "proj"
    (base_dir / "src" / "utils").mkdir(parents=True)
    (base_dir / "docs").mkdir()
    (base_dir / "src" / "main.py").write_text("def main():\n    pass\n")
    (base_dir / "src" / "utils" / "helpers.py").write_text("")
    (base_dir / "docs" / "README.md").write_text("# Test\n")
    (base_dir / ".gitignore").write_text("*.pyc\n")
    (base_dir / "setup.cfg").write_text("")
    return base_dir


def test_default_listing(temp_project):
    result = run_cli(temp_project)

    assert result.returncode == 0
    assert result.stdout == (
        "proj\n"
        "├── docs\n"
        "│   └── README.md\n"
        "├── setup.cfg\n"
        "└── src\n"
        "    ├── main.py\n"
        "    └── utils\n"
        "        └── helpers.py\n"
        "\n"
        "3 directories, 4 files\n"
    )


def test_show_all_and_depth(temp_project):
    result = run_cli("-a", "-L", "1", "--noreport", temp_project)
    assert result.stdout.splitlines() == ["proj", "├── .gitignore", "├── docs", "├── setup.cfg", "└── src"]


def test_exclude_pattern(temp_project):
    result = run_cli("-I", "utils", temp_project)
    assert "helpers.py" not in result.stdout
    assert result.stdout.endswith("2 directories, 3 files\n")


def test_output_file(temp_project, tmp_path):
    output = tmp_path / "tree.txt"
    result = run_cli("-o", output, temp_project)

    assert result.returncode == 0
    assert result.stdout == ""
    assert output.read_text(encoding="utf-8").startswith("proj\n├── docs\n")


def test_version():
    result = run_cli("--version")
    assert result.returncode == 0
    assert result.stdout.startswith("dirtree ")


def test_bad_level_exit_code(temp_project):
    result = run_cli("-L", "0", temp_project)
    assert result.returncode == 2
    assert "Invalid level" in result.stderr


def test_empty_pattern_exit_code(temp_project):
    result = run_cli("-P", "", temp_project)
    assert result.returncode == 1
    assert "Try 'dirtree --help'" in result.stderr


def test_missing_directory_lists_cwd(temp_project, tmp_path):
    result = run_cli("--noreport", "-L", "1", tmp_path / "missing", cwd=temp_project)
    assert result.returncode == 0
    assert result.stdout.splitlines()[0] == Path(temp_project).name
    assert "Warning:" in result.stderr


@pytest.mark.skipif(sys.platform == "win32", reason="Requires POSIX pipes")
def test_broken_pipe(tmp_path):
    base_dir = tmp_path / "wide"
    base_dir.mkdir()
    for i in range(5000):
        (base_dir / f"file_{i:05d}.txt").touch()

    process = subprocess.Popen(
        [sys.executable, "-m", "dirtree.cli.main", str(base_dir)],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
    )
    process.stdout.readline()
    process.stdout.close()
    _, stderr = process.communicate(timeout=30)

    assert process.returncode in (0, 141)
    assert b"Traceback" not in stderr

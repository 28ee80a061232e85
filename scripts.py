"""Developer task shortcuts: ``python scripts.py run_tests`` and friends."""

import subprocess
import sys


def run_tests():
    subprocess.run(["pytest"], check=True)


def run_doctests():
    subprocess.run(["pytest", "--doctest-modules", "src/dirtree"], check=True)


def run_lint():
    subprocess.run(["flake8", "--max-line-length=120", "src", "tests"], check=True)


def run_typecheck():
    subprocess.run(["mypy", "src"], check=True)


def run_format():
    subprocess.run(["black", "src", "tests"], check=True)


def run_coverage():
    subprocess.run(["pytest", "--cov=dirtree", "tests/", "--cov-report=term-missing"], check=True)


if __name__ == "__main__":
    globals()[sys.argv[1]]()

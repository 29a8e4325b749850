"""Run lint, type and test checks for flat-tree through uv.

Usage:
    python run_checks.py            # ruff, mypy, pytest
    python run_checks.py pytest     # only the named checks
"""
from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent

CHECKS: dict[str, list[str]] = {
    "ruff": ["uv", "run", "ruff", "check", "src", "tests"],
    "mypy": ["uv", "run", "mypy", "src"],
    "pytest": ["uv", "run", "pytest", "-q"],
}


def run_check(name: str, command: list[str]) -> int:
    output_file = PROJECT_ROOT / f"{name}_output.txt"
    print(f"Running {name}: {' '.join(command)}")
    with open(output_file, "w") as f:
        result = subprocess.run(command, cwd=PROJECT_ROOT, stdout=f, stderr=subprocess.STDOUT, text=True)
    status = "ok" if result.returncode == 0 else f"failed (exit {result.returncode}), see {output_file.name}"
    print(f"  {name}: {status}")
    return result.returncode


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run flat-tree code quality checks.")
    parser.add_argument("checks", nargs="*", choices=sorted(CHECKS), help="Checks to run (default: all).")
    args = parser.parse_args(argv)

    selected = args.checks or list(CHECKS)
    failed = [name for name in selected if run_check(name, CHECKS[name]) != 0]
    if failed:
        print(f"Failed checks: {', '.join(failed)}")
        return 1
    print("All checks passed!")
    return 0


if __name__ == "__main__":
    sys.exit(main())

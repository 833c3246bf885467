#!/usr/bin/env python3
# Copyright 2026 ProtoSchema Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run all CI checks locally: format, lint, tests, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["ruff", "format", "--check", "src/", "tests/"]),
    ("Lint", ["ruff", "check", "src/", "tests/"]),
    ("Tests", ["pytest", "--cov=protoschema", "--cov-report=term-missing"]),
    ("Build", [sys.executable, "-m", "pip", "wheel", "--no-deps", "-w", "dist", "."]),
]


def main() -> int:
    """Run every CI step, then print a coloured pass/fail summary."""
    results: list[tuple[str, bool, float]] = []

    for name, cmd in STEPS:
        sep = chalk.blue("=" * 60)
        print(f"\n{sep}")
        print(chalk.blue(name))
        print(sep)
        start = time.monotonic()
        try:
            returncode = subprocess.run(cmd, cwd=_repo_root()).returncode
        except FileNotFoundError:
            print(chalk.red(f"  command not found: {cmd[0]}"))
            returncode = 127
        results.append((name, returncode == 0, time.monotonic() - start))

    sep = "=" * 60
    print(f"\n{chalk.blue(sep)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(sep))
    for name, passed, elapsed in results:
        colour = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(colour(f"  {status}  {name} ({elapsed:.1f}s)"))

    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################


def _repo_root() -> Path:
    return Path(__file__).resolve().parent.parent


if __name__ == "__main__":
    sys.exit(main())

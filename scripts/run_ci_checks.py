#!/usr/bin/env python3
# =============================================================================
# stateerrors v0.1.0 -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# Runs the test suite (coverage gate configured in pytest.ini), then runs
# usage_example.py to confirm the public API still drives both variants end
# to end. Stops at the first failing stage.
#
# Exit codes: 0 all passed, 1 tests failed, 2 usage example failed.
#
#   python scripts/run_ci_checks.py
# =============================================================================

from __future__ import annotations

import subprocess
import sys
import pathlib

_REPO_ROOT = pathlib.Path(__file__).parent.parent
_PYTHON    = sys.executable

_STAGES = [
    ("tests", [_PYTHON, "-m", "pytest"], 1),
    ("usage_example", [_PYTHON, str(_REPO_ROOT / "usage_example.py")], 2),
]


def _separator(char: str = "=", width: int = 72) -> str:
    return char * width


def _run(cmd: list[str], label: str) -> int:
    """Run one stage from the repository root and return its exit code."""
    print(_separator())
    print(f"stage: {label}")
    print(f"cmd:   {' '.join(cmd)}")
    print(_separator("-"))
    sys.stdout.flush()
    return subprocess.run(cmd, cwd=str(_REPO_ROOT)).returncode


def main() -> int:
    for label, cmd, failure_code in _STAGES:
        returncode = _run(cmd, label)
        if returncode != 0:
            print(_separator())
            print(f"{label}: FAILED (exit {returncode})")
            sys.stdout.flush()
            return failure_code
        print(f"{label}: ok")

    print(_separator())
    print("all stages passed: " + ", ".join(label for label, _, _ in _STAGES))
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())

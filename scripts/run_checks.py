#!/usr/bin/env python3
"""
Run the namefully checks locally using the ACTIVE virtual environment.

Order:
  1) uv sync --all-extras [--frozen if uv.lock exists]
  2) black --check on the package, the tests and this script
  3) mypy on the package
  4) pytest tests/ with coverage

Pass --skip-sync to reuse the environment as it is.
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Dict, List, Optional

REPO = Path(__file__).resolve().parent.parent
LINE_LENGTH = "120"
COVERAGE_FLOOR = "85"


def uv() -> List[str]:
    uv_path = shutil.which("uv")
    if uv_path is None:
        print("ERROR: 'uv' not found. Install uv first.", file=sys.stderr)
        sys.exit(2)
    return [uv_path, "run", "--active"]


def run(cmd: List[str], env: Optional[Dict[str, str]] = None) -> None:
    print(">>>", " ".join(cmd))
    subprocess.run(cmd, check=True, cwd=str(REPO), env=env)


def main(argv: List[str]) -> None:
    if "--skip-sync" not in argv:
        sync = ["sync", "--active", "--all-extras"]
        if (REPO / "uv.lock").exists():
            sync.append("--frozen")
        run([uv()[0], *sync])

    run(uv() + ["black", "namefully", "tests", "scripts", "--check", "--line-length", LINE_LENGTH])
    run(uv() + ["mypy", "namefully", "--ignore-missing-imports"])

    env = os.environ.copy()
    env["PYTHONPATH"] = str(REPO)
    run(
        uv()
        + ["pytest", "tests/", "--cov=namefully", "--cov-report=term-missing", f"--cov-fail-under={COVERAGE_FLOOR}"],
        env=env,
    )
    print("\nALL CHECKS PASSED")


if __name__ == "__main__":
    try:
        main(sys.argv[1:])
    except subprocess.CalledProcessError as e:
        print(f"\nCommand failed with exit code {e.returncode}", file=sys.stderr)
        sys.exit(e.returncode)

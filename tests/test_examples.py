"""Smoke tests for example scripts.

These tests ensure that the example scripts run their main execution paths
without raising exceptions.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path

import pytest

# Determine the repo root
ROOT = Path(__file__).resolve().parents[1]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("interpolation_demo.py", "Maximum interpolation error"),
        ("optimization_demo.py", "6315.625"),
        ("fitting_demo.py", "normal equations vs lstsq"),
    ],
)
def test_example_runs(name: str, expected: str) -> None:
    script = ROOT / "examples" / name
    assert script.exists(), f"Example script not found: {script}"

    result = subprocess.run(
        [sys.executable, str(script)],
        capture_output=True,
        text=True,
        check=False,
        timeout=120,
    )

    assert result.returncode == 0, (
        f"Example script failed with return code {result.returncode}.\n"
        f"STDOUT:\n{result.stdout}\n"
        f"STDERR:\n{result.stderr}"
    )
    assert expected in result.stdout
    assert "All examples completed successfully!" in result.stdout

"""Shared fixtures."""

import os
import subprocess
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parent.parent / "src"


@pytest.fixture
def run_cli():
    """Run ``python -m mdmend.cli`` with the source tree importable."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC), env.get("PYTHONPATH")]))

    def run(*args, input=None, cwd=None):
        return subprocess.run(
            [sys.executable, "-m", "mdmend.cli", *args],
            capture_output=True,
            text=True,
            input=input,
            cwd=cwd,
            env=env,
        )

    return run

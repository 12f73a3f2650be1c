"""Pytest configuration and fixtures for running the parser against a real GDB."""

import shutil
import subprocess  # nosec B404 # noqa: S404
from pathlib import Path

import pytest

GDB_PATH = "/usr/bin/gdb"
GDB_TIMEOUT = 30.0

EVALUATE_TOKEN = 7
MI_COMMANDS = [
    "-list-features",
    f"{EVALUATE_TOKEN}-data-evaluate-expression 1+2",
    '-interpreter-exec console "echo hello\\\\n"',
    "-gdb-set confirm off",
    "-gdb-exit",
]


def find_gdb() -> str | None:
    """Return the path to GDB, or None if it is not installed."""
    if Path(GDB_PATH).exists():
        return GDB_PATH
    return shutil.which("gdb")


@pytest.fixture(scope="session")
def gdb_transcript() -> list[str]:
    """Run GDB in MI mode over a few commands and return its stdout lines."""
    gdb_path = find_gdb()
    if gdb_path is None:
        pytest.skip("GDB is not installed")

    completed = subprocess.run(  # nosec B603 # noqa: S603
        [gdb_path, "--nx", "--quiet", "--interpreter=mi3"],
        input="\n".join(MI_COMMANDS) + "\n",
        capture_output=True,
        text=True,
        encoding="utf-8",
        errors="surrogateescape",
        timeout=GDB_TIMEOUT,
        check=False,
    )
    return completed.stdout.splitlines()


@pytest.fixture
def evaluate_token() -> int:
    """Token of the expression evaluation command in the transcript."""
    return EVALUATE_TOKEN

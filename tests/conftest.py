"""Pytest fixtures for sdkran tests."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console


@pytest.fixture
def temp_sdkman_dir():
    """Create a temporary SDKMAN directory with an empty var/ folder."""
    with tempfile.TemporaryDirectory() as tmpdir:
        sdkman_dir = Path(tmpdir)
        (sdkman_dir / "var").mkdir()
        yield sdkman_dir


@pytest.fixture
def version_file(temp_sdkman_dir):
    """Path of the CLI version file (not created)."""
    return temp_sdkman_dir / "var" / "version"


def _capture_console() -> Console:
    return Console(
        file=io.StringIO(),
        force_terminal=False,
        color_system=None,
        width=120,
        highlight=False,
        markup=False,
    )


@pytest.fixture
def stdout_console():
    """Plain console capturing what would go to stdout."""
    return _capture_console()


@pytest.fixture
def stderr_console():
    """Plain console capturing what would go to stderr."""
    return _capture_console()

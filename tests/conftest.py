"""Pytest configuration and fixtures."""

import logging
import os
import stat
import sys
from pathlib import Path
from typing import Callable

import pytest
import structlog

# Add src to path for imports when the package is not installed
_src_path = Path(__file__).resolve().parent.parent / "src"
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

from macpack_launcher.domain.value_objects import ToolLocation
from macpack_launcher.infrastructure.config import get_settings


def pytest_configure(config):
    config.addinivalue_line("markers", "integration: runs real stub executables")
    config.addinivalue_line("markers", "contract: exercises the macpack-launch CLI")


def write_script(path: Path, body: str, executable: bool = True) -> Path:
    """Write a /bin/sh script and optionally mark it executable."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#!/bin/sh\n" + body + "\n")
    mode = stat.S_IRUSR | stat.S_IWUSR
    if executable:
        mode |= stat.S_IXUSR
    os.chmod(path, mode)
    return path


@pytest.fixture
def make_tool(tmp_path) -> Callable[..., Path]:
    """Factory creating a stub macpack executable in a scratch directory."""
    counter = {"n": 0}

    def _make(body: str, executable: bool = True) -> Path:
        counter["n"] += 1
        return write_script(tmp_path / "tools" / f"macpack_{counter['n']}", body, executable)

    return _make


@pytest.fixture
def fake_home(tmp_path, monkeypatch) -> Path:
    """Point HOME at an empty scratch directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def install_tool(fake_home) -> Callable[..., Path]:
    """Install a stub macpack at <fake home>/.macpack/bin/macpack."""

    def _install(body: str, executable: bool = True) -> Path:
        return write_script(fake_home / ToolLocation.RELATIVE_PATH, body, executable)

    return _install


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers installed by configure_logging() on captured streams."""
    yield
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)

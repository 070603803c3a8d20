# Author: PB
# Maintainer: PB
# Original date: 2026.10.18
# License: (c) HRDAG, 2026, GPL-2 or newer
#
# ------
# tests/conftest.py

"""
Shared test fixtures for the eiplint test suite.
"""

from unittest.mock import AsyncMock

import pytest
from loguru import logger

from eiplint.data.files import File


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point every config search path at an empty temporary home."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("EIPLINT_CONFIG_HOME", raising=False)
    yield home
    # Close any file sinks a test may have opened
    logger.remove()


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Directory picked up as EIPLINT_CONFIG_HOME (highest priority)."""
    config_dir = tmp_path / "eiplint-config"
    config_dir.mkdir()
    monkeypatch.setenv("EIPLINT_CONFIG_HOME", str(config_dir))
    return config_dir


@pytest.fixture
def resolver():
    """Resolver stub returning a valid EIP number."""
    return AsyncMock(return_value=1234)


@pytest.fixture
def eip_file():
    return File(filename="EIPS/eip-1234.md", content="---\neip: 1234\n---\n")


@pytest.fixture
def eip_repo(tmp_path):
    """A small repository checkout with one good and one misplaced proposal."""
    repo = tmp_path / "repo"
    (repo / "EIPS").mkdir(parents=True)
    (repo / "EIPS" / "eip-1234.md").write_text("---\neip: 1234\n---\n")
    (repo / "random.md").write_text("# notes\n")
    (repo / "assets" / "eip-1234").mkdir(parents=True)
    (repo / "assets" / "eip-1234" / "diagram.png").write_text("png")
    return repo

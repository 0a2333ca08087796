"""Shared pytest fixtures for qstr tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from qstr.config.settings import QstrSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_qstr_logger() -> Generator[None]:
    """Undo handler/level changes made by configure_logging (CLI runs, -v)."""
    logger = logging.getLogger("qstr")
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    yield
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate


@pytest.fixture
def config_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty directory used as CWD, with no config discoverable from env."""
    monkeypatch.delenv("QSTR_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(config_root: Path) -> QstrSettings:
    """Default settings rooted at an isolated directory."""
    return QstrSettings.from_cli(config_root=config_root)

"""Shared pytest fixtures for patternctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from patternctl.config.settings import PatternSettings


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects from CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pattern_logger = logging.getLogger("patternctl")
    pattern_level = pattern_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pattern_logger.setLevel(pattern_level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of settings discovery."""
    for name in (
        "PATTERNCTL_CONFIG",
        "PATTERNCTL_FACTORY__DOCUMENT",
        "PATTERNCTL_FACTORY__OS",
        "PATTERNCTL_CHAIN__DESKS",
        "PATTERNCTL_PROTOTYPE__HOBBIES",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PatternSettings:
    """Default settings with discovery rooted in an empty temp directory."""
    return PatternSettings.from_cli(start=tmp_path)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no patternctl.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)

"""Shared pytest fixtures for wallclock tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from wallclock.domain import registry
from wallclock.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run every test from an empty directory with no WALLCLOCK_* env vars.

    Also restores logging, telemetry and registry state that CLI runs mutate.
    """
    for key in list(os.environ):
        if key.startswith("WALLCLOCK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    logger = logging.getLogger("wallclock")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield
    logger.handlers, logger.level, logger.propagate = saved
    disable_telemetry()
    registry.clear_extensions()

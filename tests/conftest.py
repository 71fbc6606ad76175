"""Shared pytest fixtures for pizzeria tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from click.testing import CliRunner

from pizzeria.config.settings import PizzeriaSettings
from pizzeria.infrastructure.shop import Shop


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty temp directory with no PIZZERIA_* env vars.

    Keeps a developer's own pizzeria.toml or environment out of the results.
    """
    for key in list(os.environ):
        if key.startswith("PIZZERIA_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> PizzeriaSettings:
    """Default settings (starter menu, strict transitions, IDs from 1)."""
    return PizzeriaSettings.from_cli(start_dir=tmp_path)


@pytest.fixture
def shop(settings: PizzeriaSettings) -> Shop:
    """A fresh shop with the starter catalog and an empty order book."""
    return Shop(settings)

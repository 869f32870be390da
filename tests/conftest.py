"""Shared test fixtures for the tokenmint tests.

Balance directories are built under pytest's ``tmp_path`` so every test
starts from an isolated, empty directory.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

from tokenmint.core.config import Settings


@pytest.fixture
def balance_dir(tmp_path: Path) -> Path:
    """An empty balance directory."""
    directory = tmp_path / "balances"
    directory.mkdir()
    return directory


@pytest.fixture
def write_balances(balance_dir: Path) -> Callable[[str, Any], Path]:
    """Write a JSON balance file into ``balance_dir`` and return its path."""

    def _write(name: str, data: Any) -> Path:
        path = balance_dir / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the defaults, independent of the environment."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI attached to streams that no longer exist."""
    yield
    logger = logging.getLogger("tokenmint")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

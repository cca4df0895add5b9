"""Shared pytest fixtures and test helpers for noid tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from noid.services.minting import NoidService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no NOID_* environment.

    Keeps a developer's own noid.toml or env vars out of the results.
    """
    for var in ("NOID_CONFIG", "NOID_NOID__TEMPLATE", "NOID_NOID__SCHEME", "NOID_NOID__NAA"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Drop the stderr handler configure_logging() installs during CLI tests."""
    root = logging.getLogger()
    original_level = root.level
    noid = logging.getLogger("noid")
    noid_level = noid.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(original_level)
    noid.setLevel(noid_level)


@pytest.fixture
def service() -> NoidService:
    """NoidService with the default [noid] section."""
    return NoidService()


def write_config(directory: Path, body: str, name: str = "noid.toml") -> Path:
    """Write a TOML config file into *directory* and return its path."""
    path = directory / name
    path.write_text(body, encoding="utf-8")
    return path

"""Shared pytest fixtures for romanparse tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from romanparse.services.telemetry import _current_span, disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_config_override(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ROMANPARSE_* environment out of the tests."""
    for name in ("ROMANPARSE_CONFIG", "ROMANPARSE_DEMO__NUMERAL", "ROMANPARSE_DEMO__VINCULUM"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_global_state() -> Generator[None]:
    """CLI runs configure logging and telemetry; never leak them into the next test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("romanparse")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)
    disable_telemetry()
    _current_span.set(None)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no romanparse.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.chdir(tmp_path)

"""Tests for the demo CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from romanparse.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestDemoCommand:
    def test_default_sample(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "demo"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"]["numeral"] == "XXIX"
        assert data["data"]["vinculum"] == "CXVII"
        assert data["data"]["value"] == 117029

    def test_sample_from_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "romanparse.toml").write_text('[demo]\nnumeral = "X"\nvinculum = "I"\n')
        result = cli_runner.invoke(cli, ["-q", "demo"])
        assert result.exit_code == 0
        assert result.output.strip() == "1010"

    def test_sample_from_env(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ROMANPARSE_DEMO__NUMERAL", "XIV")
        result = cli_runner.invoke(cli, ["-q", "demo"])
        assert result.exit_code == 0
        assert result.output.strip() == "117014"

    def test_verbose_logs(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "demo"])
        assert result.exit_code == 0
        assert "demo started" in result.output
        assert "value: 117029" in result.output

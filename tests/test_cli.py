"""Tests for the root CLI group."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from gridstack_mcp import __version__
from gridstack_mcp.cli import cli


class TestCli:
    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("tools", "resources", "serve"):
            assert name in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"gridstack-mcp, version {__version__}" in result.output

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_no_subcommand_prints_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, [])
        assert result.exit_code == 0
        assert "Usage:" in result.output

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_json_flag(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "tools", "call", "gridstack_compact"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["ok"] is True
        assert payload["op"] == "gridstack_compact"
        assert payload["data"]["text"].startswith("## GridStack compact")

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_verbose_shows_telemetry(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-v", "tools", "call", "gridstack_compact"])
        assert result.exit_code == 0
        assert "meta:" in result.stdout
        assert "synthesize" in result.stdout

    @pytest.mark.usefixtures("_isolated_cwd")
    def test_config_flag(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        cfg = tmp_path / "alt.toml"
        cfg.write_text("[synthesis]\necho_parameters = false\n")
        result = cli_runner.invoke(
            cli, ["-c", str(cfg), "tools", "call", "gridstack_float", "-a", "val=true"]
        )
        assert result.exit_code == 0
        assert "### Parameters:" not in result.stdout

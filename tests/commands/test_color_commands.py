"""Tests for the color command group."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from qstr.cli import cli


@pytest.mark.usefixtures("config_root")
class TestColorCommands:
    def test_hex(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "color", "hex", "444"])
        assert result.exit_code == 0
        color = json.loads(result.output)["data"]["color"]
        assert color["hex"] == "#444444"
        assert color["r"] == pytest.approx(0x44 / 255)

    def test_hex_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["color", "hex", "4aF"])
        assert result.exit_code == 0
        assert result.output.startswith("OK: hex")
        assert "code: 4aF" in result.output

    def test_hex_invalid_length(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["color", "hex", "12345"])
        assert result.exit_code == 1
        assert "ERROR: hex" in result.output

    def test_hsl(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "color", "hsl", "1", "0", "0"])
        hsl = json.loads(result.output)["data"]["color"]["hsl"]
        assert hsl == {"h": 0.0, "s": 1.0, "l": 0.5}

    def test_rgb(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "color", "rgb", "0", "0", "1"])
        assert json.loads(result.output)["data"]["color"]["rgb"] == [255, 255, 255]

    def test_cap(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "color", "cap", "1", "1", "1", "--floor", "0", "--ceiling", "0.5"]
        )
        data = json.loads(result.output)["data"]
        assert data["changed"] is True
        assert data["color"]["hsl"]["l"] <= 0.5 + 1e-2

    def test_cap_default_bounds(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "color", "cap", "0", "0", "0"])
        assert json.loads(result.output)["data"]["color"]["rgb"] == [128, 128, 128]

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["color", "--examples"])
        assert result.exit_code == 0
        assert "qstr color hex 4aF" in result.output

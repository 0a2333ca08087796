"""Parametrized help and --examples tests for all CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from qstr.cli import cli

# (CLI args, expected keywords in output)
HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["strip", "html", "parts", "preview", "page", "color"]),
    (["strip", "--help"], ["TEXT", "--decode"]),
    (["html", "--help"], ["TEXT", "--floor", "--ceiling"]),
    (["parts", "--help"], ["TEXT"]),
    (["preview", "--help"], ["--force-color"]),
    (["page", "--help"], ["SOURCE", "--output", "--title"]),
    (["color", "--help"], ["hex", "hsl", "rgb", "cap"]),
    (["color", "hex", "--help"], ["DIGITS"]),
    (["color", "hsl", "--help"], ["R G B"]),
    (["color", "rgb", "--help"], ["H S L"]),
    (["color", "cap", "--help"], ["--floor", "--ceiling"]),
]

EXAMPLE_COMMANDS: list[list[str]] = [
    [],
    ["strip"],
    ["html"],
    ["parts"],
    ["preview"],
    ["page"],
    ["color"],
    ["color", "hex"],
    ["color", "hsl"],
    ["color", "rgb"],
    ["color", "cap"],
]


@pytest.mark.parametrize(
    ("args", "keywords"),
    HELP_COMMANDS,
    ids=[" ".join(args) for args, _ in HELP_COMMANDS],
)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


@pytest.mark.parametrize(
    "args",
    EXAMPLE_COMMANDS,
    ids=[" ".join(args) or "root" for args in EXAMPLE_COMMANDS],
)
def test_examples(cli_runner: CliRunner, args: list[str]) -> None:
    result = cli_runner.invoke(cli, [*args, "--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "qstr" in result.output

"""Root CLI group for qstr with global flags and command registration."""

from __future__ import annotations

import click

from qstr import __version__
from qstr.commands import register_commands
from qstr.commands._base import QstrGroup
from qstr.commands._context import AppContext
from qstr.config.settings import QstrSettings


@click.group(
    cls=QstrGroup,
    invoke_without_command=True,
    examples="""\
  qstr strip '^1Red ^x4aFteam'
  echo '^7Player^3: gg' | qstr html
  qstr --json parts 'Anti^x444body'
  qstr color hex 4aF""",
)
@click.version_option(version=__version__, prog_name="qstr")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """qstr: render Quake-style ^N / ^xRGB color strings."""
    ctx.ensure_object(dict)
    settings = QstrSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)

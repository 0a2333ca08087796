"""Commands: strip, html, parts, preview."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from qstr.commands._base import QstrCommand, decode_option, read_text, text_argument
from qstr.services.render import RenderService

if TYPE_CHECKING:
    from qstr.commands._context import AppContext


@click.command(
    cls=QstrCommand,
    examples="""\
  qstr strip '^1Red ^7vs ^x4aFBlue'
  cat chat.log | qstr strip -
  qstr strip --no-decode '^3raw'""",
)
@text_argument
@decode_option
@click.pass_obj
def strip(app: AppContext, text: str | None, decode: bool) -> None:
    """Remove all color codes from TEXT."""
    app.emit(RenderService(app.settings).strip(read_text(text), decode=decode))


@click.command(
    cls=QstrCommand,
    examples="""\
  qstr html '^1Red ^x4aFBlue'
  qstr html --floor 0.3 '^x111dark'
  qstr --json html '^7<b>not bold</b>'""",
)
@text_argument
@click.option("--floor", type=float, default=None, help="Minimum lightness for hex colors.")
@click.option("--ceiling", type=float, default=None, help="Maximum lightness for hex colors.")
@decode_option
@click.pass_obj
def html(
    app: AppContext,
    text: str | None,
    floor: float | None,
    ceiling: float | None,
    decode: bool,
) -> None:
    """Render TEXT as HTML with nested color spans."""
    service = RenderService(app.settings)
    app.emit(service.html(read_text(text), floor=floor, ceiling=ceiling, decode=decode))


@click.command(
    cls=QstrCommand,
    examples="""\
  qstr parts 'Anti^x444body'
  qstr --json parts '^1red^2green'""",
)
@text_argument
@decode_option
@click.pass_obj
def parts(app: AppContext, text: str | None, decode: bool) -> None:
    """List the colored segments of TEXT."""
    app.emit(RenderService(app.settings).parts(read_text(text), decode=decode))


@click.command(
    cls=QstrCommand,
    examples="""\
  qstr preview '^1Red ^3Yellow ^x4aFBlue'
  tail -f chat.log | qstr preview --force-color""",
)
@text_argument
@click.option(
    "--force-color", is_flag=True, help="Emit terminal colors even when not on a TTY."
)
@decode_option
@click.pass_obj
def preview(app: AppContext, text: str | None, force_color: bool, decode: bool) -> None:
    """Show TEXT in the terminal with its colors applied."""
    from qstr.output.console import create_console, get_output, preview_text

    service = RenderService(app.settings)
    if app.settings.json_output:
        app.emit(service.parts(read_text(text), decode=decode))
        return

    segments = service.segments(read_text(text), decode=decode)
    console = create_console(force_terminal=force_color or sys.stdout.isatty())
    console.print(preview_text(segments), soft_wrap=True)
    click.echo(get_output(console), nl=False, color=force_color or None)

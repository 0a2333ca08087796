"""Command: export a chat log as a standalone HTML page."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from qstr.commands._base import QstrCommand, decode_option

if TYPE_CHECKING:
    from qstr.commands._context import AppContext


@click.command(
    cls=QstrCommand,
    examples="""\
  qstr page chat.log > chat.html
  qstr page chat.log --output chat.html --title "Match 42"
  qstr -c ~/qstr.toml page chat.log -o chat.html""",
)
@click.argument("source", type=click.Path(path_type=Path))
@click.option(
    "-o", "--output", type=click.Path(path_type=Path), default=None, help="Write the page here."
)
@click.option("--title", default=None, help="Page title (default from [page] config).")
@decode_option
@click.pass_obj
def page(
    app: AppContext,
    source: Path,
    output: Path | None,
    title: str | None,
    decode: bool,
) -> None:
    """Render every line of SOURCE into one HTML page."""
    from qstr.services.render import RenderService

    app.emit(RenderService(app.settings).page(source, output=output, title=title, decode=decode))

"""Subcommand modules for qstr.

Provides register_commands() which uses deferred imports so that
``qstr --help`` does not load the rendering stack.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the color group and the rendering commands on the root group."""
    from qstr.commands.color import color

    cli.add_command(color)

    from qstr.commands.page import page
    from qstr.commands.render import html, parts, preview, strip

    cli.add_command(strip)
    cli.add_command(html)
    cli.add_command(parts)
    cli.add_command(preview)
    cli.add_command(page)

"""Command group: color conversions."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from qstr.commands._base import QstrGroup
from qstr.services.color import ColorService

if TYPE_CHECKING:
    from qstr.commands._context import AppContext

_COLOR_EXAMPLES = """\
  qstr color hex 4aF
  qstr color hsl 1 0 0
  qstr color rgb 0.5 1 0.5
  qstr color cap 0 0 0 --floor 0.5
  qstr --json color cap 1 1 1 --ceiling 0.5"""


@click.group(cls=QstrGroup, examples=_COLOR_EXAMPLES)
def color() -> None:
    """Decode hex codes and convert between RGB and HSL."""


@color.command(
    examples="""\
  qstr color hex 444
  qstr color hex ^x4aF"""
)
@click.argument("digits")
@click.pass_obj
def hex(app: AppContext, digits: str) -> None:  # noqa: A001
    """Decode a three-digit hex color code (DIGITS, ``^x`` prefix optional)."""
    app.emit(ColorService(app.settings).hex(digits))


@color.command(
    examples="""\
  qstr color hsl 0 1 1
  qstr --json color hsl 0.2 0.4 0.6"""
)
@click.argument("r", type=float)
@click.argument("g", type=float)
@click.argument("b", type=float)
@click.pass_obj
def hsl(app: AppContext, r: float, g: float, b: float) -> None:
    """Convert RGB channels in [0, 1] to HSL."""
    app.emit(ColorService(app.settings).hsl(r, g, b))


@color.command(
    examples="""\
  qstr color rgb 0.5 1 0.5
  qstr color rgb 0 0 1"""
)
@click.argument("h", type=float)
@click.argument("s", type=float)
@click.argument("lightness", metavar="L", type=float)
@click.pass_obj
def rgb(app: AppContext, h: float, s: float, lightness: float) -> None:
    """Convert HSL (hue as a fraction of the wheel) to RGB."""
    app.emit(ColorService(app.settings).rgb(h, s, lightness))


@color.command(
    examples="""\
  qstr color cap 0 0 0 --floor 0.5
  qstr color cap 1 1 1 --floor 0 --ceiling 0.5"""
)
@click.argument("r", type=float)
@click.argument("g", type=float)
@click.argument("b", type=float)
@click.option("--floor", type=float, default=0.5, show_default=True, help="Minimum lightness.")
@click.option("--ceiling", type=float, default=1.0, show_default=True, help="Maximum lightness.")
@click.pass_obj
def cap(app: AppContext, r: float, g: float, b: float, floor: float, ceiling: float) -> None:
    """Clamp the lightness of an RGB color."""
    app.emit(ColorService(app.settings).cap(r, g, b, floor, ceiling))

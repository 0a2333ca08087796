"""The fixed ten-entry palette selected by basic ``^N`` codes.

Entries are pre-chosen to stay legible on dark backgrounds, so renderers
do not cap their lightness.
"""

from __future__ import annotations

from qstr.domain.color import RGBColor

BASIC_PALETTE: tuple[RGBColor, ...] = (
    RGBColor.from_255(128, 128, 128),  # ^0 grey
    RGBColor.from_255(255, 0, 0),  # ^1 red
    RGBColor.from_255(51, 255, 0),  # ^2 green
    RGBColor.from_255(255, 255, 0),  # ^3 yellow
    RGBColor.from_255(51, 102, 255),  # ^4 blue
    RGBColor.from_255(51, 255, 255),  # ^5 cyan
    RGBColor.from_255(255, 51, 102),  # ^6 pink
    RGBColor.from_255(255, 255, 255),  # ^7 white
    RGBColor.from_255(153, 153, 153),  # ^8 light grey
    RGBColor.from_255(128, 128, 128),  # ^9 grey
)


def basic_color(digit: int) -> RGBColor:
    """Return the palette entry for a basic code digit (``0``-``9``)."""
    return BASIC_PALETTE[digit]

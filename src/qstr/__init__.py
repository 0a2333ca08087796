"""qstr: render Quake-style color strings as text, HTML, or colored segments."""

from __future__ import annotations

from qstr.domain.color import (
    HSLColor,
    RGBColor,
    cap_lightness,
    hex_to_rgb,
    hsl_to_rgb,
    rgb_to_hsl,
)
from qstr.domain.tokens import ColorSegment
from qstr.render.html import to_html
from qstr.render.text import color_parts, stripped

__version__ = "0.1.0"

__all__ = [
    "ColorSegment",
    "HSLColor",
    "RGBColor",
    "__version__",
    "cap_lightness",
    "color_parts",
    "hex_to_rgb",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "stripped",
    "to_html",
]

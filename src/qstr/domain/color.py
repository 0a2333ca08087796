"""RGB and HSL color values with conversion and lightness capping.

All channel math happens on floats in ``[0, 1]``. Byte values (``0..255``)
only appear at the rendering boundary via :meth:`RGBColor.to_255`.

The conversions follow the two-phase formulas of :mod:`colorsys`:
hue is a fraction of the color wheel, not degrees.

INVARIANT: every function here is total. Malformed input degrades to a
defined value (black channel, unchanged color) and never raises.
"""

from __future__ import annotations

import string

from pydantic import BaseModel, field_validator

ONE_THIRD = 1.0 / 3.0
ONE_SIXTH = 1.0 / 6.0
TWO_THIRD = 2.0 / 3.0


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


class RGBColor(BaseModel):
    """A color in RGB space with every channel in ``[0, 1]``."""

    model_config = {"frozen": True}

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @field_validator("r", "g", "b")
    @classmethod
    def _in_unit_range(cls, value: float) -> float:
        return _clamp(value)

    @classmethod
    def from_255(cls, r: float, g: float, b: float) -> RGBColor:
        """Build a color from byte-scaled channel values."""
        return cls(r=r / 255.0, g=g / 255.0, b=b / 255.0)

    def to_255(self) -> tuple[int, int, int]:
        """Return the channels scaled to bytes, rounded to the nearest int."""
        return (round(self.r * 255), round(self.g * 255), round(self.b * 255))

    def css(self) -> str:
        """CSS functional notation, e.g. ``rgb(255,0,0)``."""
        r, g, b = self.to_255()
        return f"rgb({r},{g},{b})"

    def hex(self) -> str:
        r, g, b = self.to_255()
        return f"#{r:02x}{g:02x}{b:02x}"

    def hsl(self) -> HSLColor:
        return rgb_to_hsl(self)

    def cap_lightness(self, floor: float, ceiling: float) -> RGBColor:
        return cap_lightness(self, floor, ceiling)


class HSLColor(BaseModel):
    """A color in HSL space.

    Attributes:
        h: Hue as a fraction of the color wheel, wrapped into ``[0, 1)``.
        s: Saturation in ``[0, 1]``.
        l: Lightness in ``[0, 1]``.
    """

    model_config = {"frozen": True}

    h: float = 0.0
    s: float = 0.0
    l: float = 0.0  # noqa: E741

    @field_validator("h")
    @classmethod
    def _wrap_hue(cls, value: float) -> float:
        hue = float(value) % 1.0
        if hue >= 1.0:
            hue = 0.0
        return hue

    @field_validator("s", "l")
    @classmethod
    def _in_unit_range(cls, value: float) -> float:
        return _clamp(value)

    def rgb(self) -> RGBColor:
        return hsl_to_rgb(self)


def rgb_to_hsl(c: RGBColor) -> HSLColor:
    """Convert an RGB color to HSL.

    Achromatic colors (``r == g == b``, compared exactly) get ``h = s = 0``.
    When two channels share the maximum, red wins over green and green
    over blue.
    """
    max_c = max(c.r, c.g, c.b)
    min_c = min(c.r, c.g, c.b)

    lightness = (min_c + max_c) / 2.0
    if min_c == max_c:
        return HSLColor(h=0.0, s=0.0, l=lightness)

    spread = max_c - min_c
    if lightness <= 0.5:
        saturation = spread / (max_c + min_c)
    else:
        saturation = spread / (2.0 - max_c - min_c)

    rc = (max_c - c.r) / spread
    gc = (max_c - c.g) / spread
    bc = (max_c - c.b) / spread

    if c.r == max_c:
        hue = bc - gc
    elif c.g == max_c:
        hue = 2.0 + rc - bc
    else:
        hue = 4.0 + gc - rc

    # % is non-negative for a positive divisor, but a tiny negative hue can
    # round up to exactly 1.0.
    hue = (hue / 6.0) % 1.0
    if hue >= 1.0:
        hue = 0.0
    return HSLColor(h=hue, s=saturation, l=lightness)


def _channel(m1: float, m2: float, hue: float) -> float:
    """Reconstruct one RGB channel from the HSL intermediates."""
    hue = hue % 1.0
    if hue < 0.0:
        hue += 1.0

    if hue < ONE_SIXTH:
        return m1 + (m2 - m1) * hue * 6.0
    if hue < 0.5:
        return m2
    if hue < TWO_THIRD:
        return m1 + (m2 - m1) * (TWO_THIRD - hue) * 6.0
    return m1


def hsl_to_rgb(c: HSLColor) -> RGBColor:
    """Convert an HSL color to RGB."""
    if c.s == 0.0:
        return RGBColor(r=c.l, g=c.l, b=c.l)

    if c.l <= 0.5:
        m2 = c.l * (1.0 + c.s)
    else:
        m2 = c.l + c.s - (c.l * c.s)
    m1 = 2.0 * c.l - m2

    return RGBColor(
        r=_channel(m1, m2, c.h + ONE_THIRD),
        g=_channel(m1, m2, c.h),
        b=_channel(m1, m2, c.h - ONE_THIRD),
    )


def cap_lightness(c: RGBColor, floor: float, ceiling: float) -> RGBColor:
    """Clamp the lightness of *c* into ``[floor, ceiling]``.

    Bounds must satisfy ``0 <= floor < ceiling <= 1``; otherwise *c* is
    returned unchanged. A color already inside the bounds is also returned
    as-is, skipping the lossy HSL round trip.
    """
    if floor >= ceiling or floor < 0.0 or ceiling > 1.0:
        return c

    hsl = rgb_to_hsl(c)
    if hsl.l < floor:
        lightness = floor
    elif hsl.l > ceiling:
        lightness = ceiling
    else:
        return c
    return hsl_to_rgb(hsl.model_copy(update={"l": lightness}))


def _hex_byte(digit: str) -> int:
    """Parse a doubled hex digit (``"4"`` -> ``0x44``); anything else is 0."""
    if len(digit) != 1 or digit not in string.hexdigits:
        return 0
    return int(digit * 2, 16)


def hex_to_rgb(r: str, g: str, b: str) -> RGBColor:
    """Convert three single hex digits into a color.

    Each digit is doubled to form a byte, so ``("4", "4", "4")`` is
    ``#444444``. Non-hex digits decode to a zero channel.
    """
    return RGBColor.from_255(_hex_byte(r), _hex_byte(g), _hex_byte(b))

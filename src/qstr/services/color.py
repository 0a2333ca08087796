"""ColorService: color conversions exposed to the CLI.

The domain functions are total; this layer only adds argument checks for
the command line and turns silent degradation into warnings.
"""

from __future__ import annotations

import string

from qstr.domain.color import HSLColor, RGBColor, cap_lightness, hex_to_rgb
from qstr.services.base import BaseService
from qstr.services.render import color_payload
from qstr.services.result import ServiceResult


def _out_of_range(*values: float) -> bool:
    return any(v < 0.0 or v > 1.0 for v in values)


class ColorService(BaseService):
    """Hex decoding, RGB/HSL conversion, and lightness capping."""

    def hex(self, digits: str) -> ServiceResult:
        """Decode a three-digit hex code such as ``"4aF"`` (``^x`` optional)."""
        op = "hex"
        code = digits.removeprefix("^").removeprefix("x")
        if len(code) != 3:
            return ServiceResult.failure(
                op, "INVALID_COLOR", f"Expected three hex digits, got {digits!r}"
            )
        warnings = [
            f"{ch!r} is not a hex digit; channel decodes to 0"
            for ch in code
            if ch not in string.hexdigits
        ]
        color = hex_to_rgb(code[0], code[1], code[2])
        return ServiceResult(
            ok=True, op=op, data={"code": code, "color": color_payload(color)}, warnings=warnings
        )

    def hsl(self, r: float, g: float, b: float) -> ServiceResult:
        """Convert normalized RGB channels to HSL."""
        warnings = []
        if _out_of_range(r, g, b):
            warnings.append("Channels outside [0, 1] were clamped")
        color = RGBColor(r=r, g=g, b=b)
        return ServiceResult(
            ok=True, op="hsl", data={"color": color_payload(color)}, warnings=warnings
        )

    def rgb(self, h: float, s: float, lightness: float) -> ServiceResult:
        """Convert HSL (hue as a wheel fraction) to RGB."""
        warnings = []
        if _out_of_range(s, lightness):
            warnings.append("Saturation and lightness outside [0, 1] were clamped")
        color = HSLColor(h=h, s=s, l=lightness).rgb()
        return ServiceResult(
            ok=True, op="rgb", data={"color": color_payload(color)}, warnings=warnings
        )

    def cap(self, r: float, g: float, b: float, floor: float, ceiling: float) -> ServiceResult:
        """Cap the lightness of an RGB color into ``[floor, ceiling]``."""
        warnings = []
        if floor >= ceiling or floor < 0.0 or ceiling > 1.0:
            warnings.append(f"Bounds [{floor}, {ceiling}] are invalid; color is unchanged")
        original = RGBColor(r=r, g=g, b=b)
        capped = cap_lightness(original, floor, ceiling)
        return ServiceResult(
            ok=True,
            op="cap",
            data={
                "original": color_payload(original),
                "color": color_payload(capped),
                "changed": capped != original,
            },
            warnings=warnings,
        )

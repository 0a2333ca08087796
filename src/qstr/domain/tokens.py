"""Color-code directives and the tokenizer that splits text into colored runs.

Two directive shapes exist:

- ``^N``: a basic code, ``N`` a decimal digit selecting a palette entry.
- ``^xRGB``: a hex code, each of ``R``, ``G``, ``B`` a single hex digit.

Both shapes are matched by one combined pattern in a single left-to-right
pass, so a hex code is never also read as a basic code. Anything else after
a ``^`` (``^a``, ``^x12``, a trailing ``^``) is literal text. There is no
escape for a literal ``^`` followed by a digit.
"""

from __future__ import annotations

import re
from collections.abc import Iterator
from typing import Literal

from pydantic import BaseModel

from qstr.domain.color import RGBColor, hex_to_rgb
from qstr.domain.palette import basic_color

COLOR_CODE = re.compile(r"\^(?:x([0-9A-Fa-f])([0-9A-Fa-f])([0-9A-Fa-f])|([0-9]))")


class BasicDirective(BaseModel):
    """A ``^N`` code selecting entry ``N`` of the basic palette."""

    model_config = {"frozen": True}

    kind: Literal["basic"] = "basic"
    digit: int

    @property
    def raw(self) -> str:
        return f"^{self.digit}"

    def color(self) -> RGBColor:
        return basic_color(self.digit)


class HexDirective(BaseModel):
    """A ``^xRGB`` code; each digit is doubled into a full byte."""

    model_config = {"frozen": True}

    kind: Literal["hex"] = "hex"
    r: str
    g: str
    b: str

    @property
    def raw(self) -> str:
        return f"^x{self.r}{self.g}{self.b}"

    def color(self) -> RGBColor:
        return hex_to_rgb(self.r, self.g, self.b)


Directive = BasicDirective | HexDirective


class ColorSegment(BaseModel):
    """A maximal run of literal text and the color in effect for it.

    ``color`` is None for text that precedes the first directive.
    """

    model_config = {"frozen": True}

    text: str
    color: RGBColor | None = None


def directive_from_match(match: re.Match[str]) -> Directive:
    """Build the directive for a :data:`COLOR_CODE` match."""
    digit = match.group(4)
    if digit is not None:
        return BasicDirective(digit=int(digit))
    return HexDirective(r=match.group(1), g=match.group(2), b=match.group(3))


def iter_directives(text: str) -> Iterator[tuple[Directive, int, int]]:
    """Yield each directive in *text* with its ``(start, end)`` offsets."""
    for match in COLOR_CODE.finditer(text):
        yield directive_from_match(match), match.start(), match.end()


def tokenize(text: str) -> list[ColorSegment]:
    """Split *text* into colored segments.

    Empty runs between adjacent directives are dropped, and consecutive
    runs resolving to the same color are merged into one segment.
    """
    segments: list[ColorSegment] = []
    current: RGBColor | None = None
    pos = 0

    def flush(run: str) -> None:
        if not run:
            return
        if segments and segments[-1].color == current:
            segments[-1] = ColorSegment(text=segments[-1].text + run, color=current)
        else:
            segments.append(ColorSegment(text=run, color=current))

    for directive, start, end in iter_directives(text):
        flush(text[pos:start])
        current = directive.color()
        pos = end
    flush(text[pos:])
    return segments


def remove_directives(text: str) -> str:
    """Remove every directive substring from *text* in a single pass."""
    return COLOR_CODE.sub("", text)

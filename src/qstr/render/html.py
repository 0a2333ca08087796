"""HTML rendering with nested color spans.

The raw input is escaped exactly once, before any span is inserted, so
generated markup is never mangled. A ``Markup`` argument is escaped like
any other string; its tags would otherwise interleave with the spans.

Each directive opens a span that stays open to the end of the string: a
later directive nests inside the earlier one and all spans are closed
together at the end.
"""

from __future__ import annotations

import re

from markupsafe import Markup, escape

from qstr.domain.color import RGBColor, cap_lightness
from qstr.domain.tokens import COLOR_CODE, HexDirective, directive_from_match

DEFAULT_FLOOR = 0.5
DEFAULT_CEILING = 1.0


def span_for(color: RGBColor) -> str:
    """Return the opening ``<span>`` tag styling text with *color*."""
    return f'<span style="color:{color.css()}">'


def to_html(
    text: str,
    *,
    floor: float = DEFAULT_FLOOR,
    ceiling: float = DEFAULT_CEILING,
    cap_basic: bool = False,
) -> Markup:
    """Render *text* as HTML-safe markup.

    Hex colors have their lightness capped into ``[floor, ceiling]`` so they
    stay legible on a dark background. Basic palette colors are left as-is
    unless *cap_basic* is set.
    """
    opened = 0

    def substitute(match: re.Match[str]) -> str:
        nonlocal opened
        directive = directive_from_match(match)
        color = directive.color()
        if cap_basic or isinstance(directive, HexDirective):
            color = cap_lightness(color, floor, ceiling)
        opened += 1
        return span_for(color)

    body = COLOR_CODE.sub(substitute, str(escape(str(text))))
    return Markup(body + "</span>" * opened)

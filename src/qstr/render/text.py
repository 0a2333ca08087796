"""Plain-text and structured renderers."""

from __future__ import annotations

from qstr.domain.tokens import ColorSegment, remove_directives, tokenize


def stripped(text: str) -> str:
    """Return *text* with every color directive removed.

    Removal is repeated until the text is stable, so a directive spliced
    together by an earlier removal (``"^^11"`` -> ``"^1"``) goes too and
    ``stripped(stripped(s)) == stripped(s)`` always holds.
    """
    while True:
        result = remove_directives(text)
        if result == text:
            return result
        text = result


def color_parts(text: str) -> list[ColorSegment]:
    """Return the colored segments of *text*.

    A segment before the first directive has ``color=None``.
    """
    return tokenize(text)

"""Rich Console factory, theme, and colored terminal previews.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich drops color codes unless ``force_terminal`` is set.
"""

from __future__ import annotations

from collections.abc import Iterable
from io import StringIO

from rich.console import Console
from rich.style import Style
from rich.text import Text
from rich.theme import Theme

from qstr.domain.color import RGBColor
from qstr.domain.tokens import ColorSegment

QSTR_THEME = Theme(
    {
        "qstr.ok": "bold green",
        "qstr.error": "bold red",
        "qstr.warning": "bold yellow",
        "qstr.op": "bold cyan",
        "qstr.key": "dim",
        "qstr.nocolor": "italic dim",
    }
)


def create_console(
    *,
    no_color: bool = False,
    width: int | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
        force_terminal: Emit ANSI codes even though the buffer is not a TTY.
    """
    return Console(
        file=StringIO(),
        theme=QSTR_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
        force_terminal=force_terminal,
        color_system="truecolor" if force_terminal else "auto",
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for(color: RGBColor | None) -> Style:
    """Rich style for a segment color; uncolored text gets the default style."""
    if color is None:
        return Style.null()
    r, g, b = color.to_255()
    return Style(color=f"rgb({r},{g},{b})")


def preview_text(segments: Iterable[ColorSegment]) -> Text:
    """Build a rich Text that shows each segment in its own color."""
    text = Text()
    for seg in segments:
        text.append(seg.text, style=style_for(seg.color))
    return text

"""Literal code-point substitution for decoded game text.

Game servers often ship private-use or control characters that stand in
for glyphs (brackets, arrows, box pieces). A decode table lists
``(find, replace)`` pairs applied in order as plain find-and-replace.
This runs independently of the color pipeline, before it.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

DecodeTable = Sequence[tuple[str, str]]


def decode(text: str, table: Iterable[tuple[str, str]]) -> str:
    """Apply each ``(find, replace)`` pair of *table* to *text* in order.

    Later pairs see the output of earlier ones. Pairs with an empty
    ``find`` are skipped.

    Examples:
        >>> decode("\\x10tag\\x11 name", [("\\x10", "["), ("\\x11", "]")])
        '[tag] name'
    """
    for find, replace in table:
        if find:
            text = text.replace(find, replace)
    return text


class Transliterator(BaseModel):
    """A reusable decode table."""

    model_config = {"frozen": True}

    table: tuple[tuple[str, str], ...] = Field(default_factory=tuple)

    def __call__(self, text: str) -> str:
        return decode(text, self.table)

    def __bool__(self) -> bool:
        return bool(self.table)

"""RenderService: strip, HTML, segment, and page rendering.

Applies the configured decode table before rendering, then delegates to
:mod:`qstr.render`. Only page export touches the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from qstr.domain.color import RGBColor
from qstr.domain.tokens import ColorSegment, iter_directives
from qstr.render.html import to_html
from qstr.render.page import render_page
from qstr.render.text import color_parts, stripped
from qstr.services.base import BaseService
from qstr.services.result import ServiceResult

logger = logging.getLogger(__name__)


def color_payload(color: RGBColor | None) -> dict[str, Any] | None:
    """JSON-friendly view of a color (None stays None)."""
    if color is None:
        return None
    hsl = color.hsl()
    return {
        "r": color.r,
        "g": color.g,
        "b": color.b,
        "rgb": list(color.to_255()),
        "hex": color.hex(),
        "hsl": {"h": hsl.h, "s": hsl.s, "l": hsl.l},
    }


class RenderService(BaseService):
    """Render color strings according to the active settings."""

    def _prepare(self, text: str, *, decode: bool) -> str:
        if decode:
            transliterate = self._settings.decode.transliterator()
            if transliterate:
                text = transliterate(text)
        return text

    def strip(self, text: str, *, decode: bool = True) -> ServiceResult:
        text = self._prepare(text, decode=decode)
        return ServiceResult(ok=True, op="strip", data={"text": stripped(text)})

    def html(
        self,
        text: str,
        *,
        floor: float | None = None,
        ceiling: float | None = None,
        decode: bool = True,
    ) -> ServiceResult:
        cfg = self._settings.html
        floor = cfg.lightness_floor if floor is None else floor
        ceiling = cfg.lightness_ceiling if ceiling is None else ceiling
        warnings: list[str] = []
        if floor >= ceiling or floor < 0.0 or ceiling > 1.0:
            warnings.append(
                f"Lightness bounds [{floor}, {ceiling}] are invalid; hex colors are not capped"
            )

        text = self._prepare(text, decode=decode)
        markup = to_html(text, floor=floor, ceiling=ceiling, cap_basic=cfg.cap_basic)
        spans = sum(1 for _ in iter_directives(text))
        logger.debug("Rendered HTML with %d spans (floor=%s ceiling=%s)", spans, floor, ceiling)
        return ServiceResult(
            ok=True,
            op="html",
            data={"html": str(markup), "spans": spans},
            warnings=warnings,
        )

    def segments(self, text: str, *, decode: bool = True) -> list[ColorSegment]:
        segments = color_parts(self._prepare(text, decode=decode))
        logger.debug("Tokenized %d segments", len(segments))
        return segments

    def parts(self, text: str, *, decode: bool = True) -> ServiceResult:
        segments = self.segments(text, decode=decode)
        return ServiceResult(
            ok=True,
            op="parts",
            data={
                "segments": [
                    {"text": seg.text, "color": color_payload(seg.color)} for seg in segments
                ],
            },
        )

    def page(
        self,
        source: Path,
        *,
        output: Path | None = None,
        title: str | None = None,
        decode: bool = True,
    ) -> ServiceResult:
        """Render every line of *source* into one HTML document.

        Writes to *output* when given; otherwise returns the document in
        ``data["html"]``.
        """
        op = "page"
        try:
            lines = source.read_text(encoding="utf-8").splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            return ServiceResult.failure(
                op, "INPUT_ERROR", f"Cannot read {source}: {exc}", path=str(source)
            )

        page_cfg = self._settings.page
        html_cfg = self._settings.html
        document = render_page(
            [self._prepare(line, decode=decode) for line in lines],
            title=title or page_cfg.title,
            background=page_cfg.background,
            foreground=page_cfg.foreground,
            floor=html_cfg.lightness_floor,
            ceiling=html_cfg.lightness_ceiling,
            cap_basic=html_cfg.cap_basic,
            config_root=self._settings.config_root,
        )
        logger.debug("Rendered page from %s (%d lines)", source, len(lines))

        if output is None:
            return ServiceResult(ok=True, op=op, data={"html": document, "lines": len(lines)})

        try:
            output.write_text(document, encoding="utf-8")
        except OSError as exc:
            return ServiceResult.failure(
                op, "OUTPUT_ERROR", f"Cannot write {output}: {exc}", path=str(output)
            )
        return ServiceResult(ok=True, op=op, data={"output": str(output), "lines": len(lines)})

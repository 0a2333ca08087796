"""Tests for nested-span HTML rendering."""

from __future__ import annotations

import re

import pytest
from markupsafe import Markup

from qstr.domain.color import RGBColor
from qstr.render.html import span_for, to_html

SPAN_RGB = re.compile(r"rgb\((\d+),(\d+),(\d+)\)")


def _span_colors(html: str) -> list[RGBColor]:
    return [RGBColor.from_255(*map(int, m)) for m in SPAN_RGB.findall(html)]


class TestSpanFor:
    def test_byte_scaled(self) -> None:
        assert span_for(RGBColor(r=1, g=0.5, b=0)) == '<span style="color:rgb(255,128,0)">'


class TestToHtml:
    def test_returns_markup(self) -> None:
        assert isinstance(to_html("x"), Markup)

    def test_plain_text(self) -> None:
        assert to_html("hello") == "hello"

    def test_basic_and_hex_nested(self) -> None:
        assert to_html("^1Red^x4aFBlue") == (
            '<span style="color:rgb(255,0,0)">Red'
            '<span style="color:rgb(68,170,255)">Blue'
            "</span></span>"
        )

    def test_one_close_per_open(self) -> None:
        html = to_html("a^1b^x123c^7d^e")
        assert html.count("<span") == 3
        assert html.count("</span>") == 3
        assert html.endswith("</span></span></span>")

    def test_spans_never_closed_mid_string(self) -> None:
        html = to_html("^1a^2b")
        assert html.index("</span>") > html.index("b")

    def test_dark_hex_lightness_raised(self) -> None:
        assert to_html("^x111x") == '<span style="color:rgb(128,128,128)">x</span>'
        assert to_html("^x008x") == '<span style="color:rgb(0,0,255)">x</span>'

    def test_hex_colors_at_least_half_light(self) -> None:
        html = to_html("^1red^x000black^x300maroon^x4aFsky")
        hex_colors = _span_colors(html)[1:]
        assert all(c.hsl().l >= 0.5 - 1e-2 for c in hex_colors)

    def test_basic_colors_not_capped(self) -> None:
        assert to_html("^0grey").startswith('<span style="color:rgb(128,128,128)">')
        assert to_html("^4blue").startswith('<span style="color:rgb(51,102,255)">')

    def test_cap_basic(self) -> None:
        html = to_html("^4blue", floor=0.7, ceiling=1.0, cap_basic=True)
        (color,) = _span_colors(html)
        assert color.hsl().l >= 0.7 - 1e-2

    def test_custom_bounds(self) -> None:
        html = to_html("^xfffx", floor=0.0, ceiling=0.5)
        (color,) = _span_colors(html)
        assert color.hsl().l <= 0.5 + 1e-2

    def test_invalid_bounds_leave_hex_uncapped(self) -> None:
        assert to_html("^x000x", floor=0.9, ceiling=0.1) == (
            '<span style="color:rgb(0,0,0)">x</span>'
        )

    def test_escapes_before_substitution(self) -> None:
        assert to_html("^7<b>&\"'") == (
            '<span style="color:rgb(255,255,255)">&lt;b&gt;&amp;&#34;&#39;</span>'
        )

    def test_markup_input_escaped_as_text(self) -> None:
        html = to_html(Markup("<b>^1x</b>"))
        assert html == '<span style="color:rgb(255,0,0)">&lt;b&gt;x&lt;/b&gt;</span>'

    @pytest.mark.parametrize("text", ["<^1>", "^1&^2\"", "'^x4aF'"])
    def test_no_raw_markup_leaks(self, text: str) -> None:
        html = to_html(text)
        body = re.sub(r'<span style="color:rgb\(\d+,\d+,\d+\)">|</span>', "", html)
        assert "<" not in body
        assert ">" not in body

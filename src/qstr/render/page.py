"""Standalone HTML page export built on Jinja2 templates.

Templates load from ``.qstr/templates/`` next to the config file first
(both ``.qstr/templates/html/`` and the flat root), then from the
packaged defaults.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from qstr.render.html import DEFAULT_CEILING, DEFAULT_FLOOR, to_html

PAGE_TEMPLATE = "page.html.j2"


def build_template_environment(group: str, *, config_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults."""
    loaders: list[BaseLoader] = []
    if config_root is not None:
        template_root = config_root / ".qstr" / "templates"
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("qstr", f"templates/{group}"))
    return Environment(loader=ChoiceLoader(loaders), autoescape=True, keep_trailing_newline=True)


def render_page(
    lines: Iterable[str],
    *,
    title: str = "Chat log",
    background: str = "#000000",
    foreground: str = "#ffffff",
    floor: float = DEFAULT_FLOOR,
    ceiling: float = DEFAULT_CEILING,
    cap_basic: bool = False,
    config_root: Path | None = None,
) -> str:
    """Render each line with :func:`to_html` into one HTML document.

    Lines are already-safe markup; the title and colors are escaped by the
    template environment.
    """
    env = build_template_environment("html", config_root=config_root)
    template = env.get_template(PAGE_TEMPLATE)
    rendered = [to_html(line, floor=floor, ceiling=ceiling, cap_basic=cap_basic) for line in lines]
    return template.render(
        title=title,
        background=background,
        foreground=foreground,
        lines=rendered,
    )

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, the config file only contains
overrides. An empty (or missing) file renders exactly like the library defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from qstr.domain.decode import Transliterator


class HtmlConfig(BaseModel):
    """[html] section."""

    model_config = {"frozen": True}

    lightness_floor: float = 0.5
    lightness_ceiling: float = 1.0
    cap_basic: bool = False


class PageConfig(BaseModel):
    """[page] section."""

    model_config = {"frozen": True}

    title: str = "Chat log"
    background: str = "#000000"
    foreground: str = "#ffffff"


class DecodeConfig(BaseModel):
    """[decode] section.

    ``table`` is an ordered list of ``[find, replace]`` pairs.
    """

    model_config = {"frozen": True}

    table: tuple[tuple[str, str], ...] = Field(default_factory=tuple)
    enabled: bool = True

    def transliterator(self) -> Transliterator:
        return Transliterator(table=self.table if self.enabled else ())

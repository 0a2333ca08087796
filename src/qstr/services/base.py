"""BaseService: shared construction for qstr services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from qstr.config.settings import QstrSettings


class BaseService:
    """Base for service classes.

    Every service receives the resolved :class:`QstrSettings` so rendering
    defaults (lightness bounds, decode table, page styling) come from one
    place.
    """

    def __init__(self, settings: QstrSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> QstrSettings:
        return self._settings

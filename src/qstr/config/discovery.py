"""Config file discovery and TOML reading.

Looks for settings in each directory from the start point upward, taking
the first of:

1. ``qstr.toml``
2. ``.qstr.toml``
3. ``pyproject.toml``: only when it carries a ``[tool.qstr]`` table

``QSTR_CONFIG`` names a file directly and disables the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAMES = ("qstr.toml", ".qstr.toml")
PYPROJECT = "pyproject.toml"
CONFIG_ENV_VAR = "QSTR_CONFIG"


def read_toml(path: Path) -> dict[str, Any]:
    """Return the qstr settings table from *path*.

    For ``pyproject.toml`` that is ``[tool.qstr]``; for any other file the
    whole document. Raises ``tomllib.TOMLDecodeError`` on bad syntax.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT:
        return data.get("tool", {}).get("qstr", {})
    return data


def _pyproject_has_table(path: Path) -> bool:
    try:
        return "qstr" in tomllib.loads(path.read_text(encoding="utf-8")).get("tool", {})
    except (OSError, tomllib.TOMLDecodeError):
        return False


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) to the first config file.

    Returns None when nothing is found, or when ``QSTR_CONFIG`` points at a
    missing file.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        for name in CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        pyproject = directory / PYPROJECT
        if pyproject.is_file() and _pyproject_has_table(pyproject):
            return pyproject
    return None

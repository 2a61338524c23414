"""Locate the file shapectl reads its settings from.

Walking up from the working directory, each directory is checked for:

1. ``shapectl.toml``, with settings at the top level;
2. ``pyproject.toml`` carrying a ``[tool.shapectl]`` table.

A ``pyproject.toml`` without that table is skipped and the walk goes on.
``SHAPECTL_CONFIG`` names a file directly and disables the walk.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "shapectl.toml"
PYPROJECT_FILENAME = "pyproject.toml"
CONFIG_ENV_VAR = "SHAPECTL_CONFIG"


def read_settings_table(path: Path) -> dict[str, Any]:
    """Return the shapectl settings stored in *path*.

    Raises ``tomllib.TOMLDecodeError`` for a malformed file.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    if path.name == PYPROJECT_FILENAME:
        tool = data.get("tool", {})
        table = tool.get("shapectl", {}) if isinstance(tool, dict) else {}
        return table if isinstance(table, dict) else {}
    return data


def _declares_settings(pyproject: Path) -> bool:
    try:
        data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        # Another tool's broken pyproject.toml is not ours to report.
        logger.debug("Skipping unreadable %s", pyproject)
        return False
    tool = data.get("tool")
    return isinstance(tool, dict) and "shapectl" in tool


def find_config(start: Path | None = None) -> Path | None:
    """Return the settings file governing *start* (default: cwd), if any."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        own = directory / CONFIG_FILENAME
        if own.is_file():
            return own
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _declares_settings(pyproject):
            logger.debug("Using [tool.shapectl] from %s", pyproject)
            return pyproject
    return None

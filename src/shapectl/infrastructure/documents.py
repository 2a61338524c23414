"""Load config documents from disk.

Supported formats, chosen by file suffix:
- ``.json``: stdlib json
- ``.toml``: stdlib tomllib
- ``.yaml`` / ``.yml``: ruamel.yaml safe loader (plain dicts and lists)
"""

from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".toml", ".yaml", ".yml")


class DocumentError(Exception):
    """A config document could not be read or decoded."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


def _new_yaml() -> YAML:
    """Fresh safe loader per call; ruamel's YAML object is stateful."""
    return YAML(typ="safe", pure=True)


def load_document(path: Path) -> object:
    """Read and decode *path* into plain Python values."""
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = (
            f"unsupported format '{suffix or path.name}' "
            f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )
        raise DocumentError(path, msg)
    if not path.is_file():
        raise DocumentError(path, "file not found")

    logger.debug("Loading %s document from %s", suffix.lstrip("."), path)
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentError(path, f"not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise DocumentError(path, f"cannot read file: {exc.strerror or exc}") from exc

    try:
        if suffix == ".json":
            return json.loads(text)
        if suffix == ".toml":
            return tomllib.loads(text)
        return _new_yaml().load(text)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, YAMLError) as exc:
        raise DocumentError(path, f"invalid {suffix.lstrip('.').upper()}: {exc}") from exc

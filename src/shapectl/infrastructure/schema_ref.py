"""Resolve ``package.module:attribute`` references to validator objects."""

from __future__ import annotations

import importlib
import logging
from typing import Any

from shapectl.validator.base import Validator

logger = logging.getLogger(__name__)


class SchemaRefError(Exception):
    """A schema reference could not be resolved to a validator."""


def resolve_schema(ref: str) -> Validator[Any]:
    """Import the module named in *ref* and return the validator it points at.

    The attribute part may be dotted (``configs:Panel.Clock``).
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path or module_name.startswith("."):
        msg = f"Invalid schema reference '{ref}' (expected 'module:attribute')"
        raise SchemaRefError(msg)

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Cannot import module '{module_name}': {exc}"
        raise SchemaRefError(msg) from exc
    except Exception as exc:
        # User schema modules run arbitrary code on import.
        msg = f"Error while importing '{module_name}': {type(exc).__name__}: {exc}"
        raise SchemaRefError(msg) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            msg = f"'{module_name}' has no attribute '{attr_path}'"
            raise SchemaRefError(msg) from exc

    if not isinstance(target, Validator):
        msg = f"'{ref}' is a {type(target).__name__}, not a validator"
        raise SchemaRefError(msg)

    logger.debug("Resolved schema %s", ref)
    return target

"""Runtime kind classification for untrusted values.

Kinds follow the vocabulary of loosely-typed config sources (JSON, TOML,
YAML, scripting hosts): ``absent``, ``null``, ``boolean``, ``number``,
``string``, ``array``, ``object`` and ``function``.
"""

from __future__ import annotations

from collections.abc import Mapping

from shapectl.validator.absent import ABSENT


def is_number(value: object) -> bool:
    """True for int and float. ``bool`` is a separate kind."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: object) -> bool:
    return isinstance(value, (list, tuple))


def describe_kind(value: object) -> str:
    """Name the runtime kind of *value* for use in error messages."""
    if value is ABSENT:
        return "absent"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__


def format_literal(value: object) -> str:
    """Render a literal the way it appears in messages (``'left'``, ``null``)."""
    if value is None:
        return "null"
    if value is ABSENT:
        return "absent"
    return repr(value)

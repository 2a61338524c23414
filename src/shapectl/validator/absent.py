"""The ``ABSENT`` sentinel.

``ABSENT`` means "field or value was not provided". It is distinct from
``None``, which is an explicit null supplied by the caller.
"""

from __future__ import annotations

from enum import Enum


class Absent(Enum):
    """Single-member enum so the sentinel survives pickling and type-narrows."""

    ABSENT = "absent"

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT

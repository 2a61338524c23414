"""Literal validator: exact match against one primitive value.

The base case for discriminated configuration tags, e.g.
``object({"type": literal("clock"), ...})``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from shapectl.validator.absent import Absent
from shapectl.validator.base import BaseValidator, Optional, Required
from shapectl.validator.errors import LiteralMismatch, TypeMismatch
from shapectl.validator.kinds import describe_kind, format_literal

LiteralValue = str | int | float | None | Absent
LITERAL_KINDS = frozenset({"string", "number", "null", "absent"})

L = TypeVar("L", bound=LiteralValue)


@dataclass(frozen=True, eq=False)
class _LiteralBase(BaseValidator[L], Generic[L]):
    expected: L

    def __post_init__(self) -> None:
        if describe_kind(self.expected) not in LITERAL_KINDS:
            msg = (
                "literal() accepts a string, number, None or ABSENT, "
                f"got {type(self.expected).__name__}"
            )
            raise TypeError(msg)

    def optional(self) -> OptionalLiteralValidator[L]:
        return OptionalLiteralValidator(self.expected)

    def _base_parse(self, value: object) -> L:
        message = f"Must be {format_literal(self.expected)}."
        expected_kind = describe_kind(self.expected)
        received_kind = describe_kind(value)
        if received_kind != expected_kind:
            raise TypeMismatch(message, expected=expected_kind, received=received_kind)
        # Same kind: None and ABSENT are singletons, str/number compare by value.
        if value != self.expected:
            raise LiteralMismatch(message, expected=self.expected, received=value)
        return value  # type: ignore[return-value]


class LiteralValidator(Required[L], _LiteralBase[L]):
    pass


class OptionalLiteralValidator(Optional[L], _LiteralBase[L]):
    pass


def literal(expected: L) -> LiteralValidator[L]:
    return LiteralValidator(expected)

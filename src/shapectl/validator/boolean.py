"""Boolean validator."""

from __future__ import annotations

from dataclasses import dataclass

from shapectl.validator.base import BaseValidator, Optional, Required
from shapectl.validator.errors import TypeMismatch
from shapectl.validator.kinds import describe_kind


@dataclass(frozen=True, eq=False)
class _BooleanBase(BaseValidator[bool]):
    def optional(self) -> OptionalBooleanValidator:
        return OptionalBooleanValidator()

    def _base_parse(self, value: object) -> bool:
        if not isinstance(value, bool):
            raise TypeMismatch(
                "Must be a boolean.", expected="boolean", received=describe_kind(value)
            )
        return value


class BooleanValidator(Required[bool], _BooleanBase):
    pass


class OptionalBooleanValidator(Optional[bool], _BooleanBase):
    pass


def boolean() -> BooleanValidator:
    return BooleanValidator()

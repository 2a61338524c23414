"""String validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from shapectl.validator.base import Optional, Refinable, Refinement, Required
from shapectl.validator.errors import TypeMismatch
from shapectl.validator.kinds import describe_kind

_NON_EMPTY: Refinement[str] = Refinement(
    name="non_empty",
    check=lambda s: s != "",
    message="Must be a non-empty string.",
)


@dataclass(frozen=True, eq=False)
class _StringBase(Refinable[str]):
    refinements: tuple[Refinement[str], ...] = ()

    def non_empty(self) -> Self:
        return self._refine(_NON_EMPTY)

    def optional(self) -> OptionalStringValidator:
        return OptionalStringValidator(refinements=self.refinements)

    def _base_parse(self, value: object) -> str:
        if not isinstance(value, str):
            raise TypeMismatch(
                "Must be a string.", expected="string", received=describe_kind(value)
            )
        return self._apply_refinements(value)


class StringValidator(Required[str], _StringBase):
    pass


class OptionalStringValidator(Optional[str], _StringBase):
    pass


def string() -> StringValidator:
    return StringValidator()

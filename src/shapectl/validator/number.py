"""Number validator: int or float, never bool."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from shapectl.validator.base import Optional, Refinable, Refinement, Required
from shapectl.validator.errors import TypeMismatch
from shapectl.validator.kinds import describe_kind, is_number

_POSITIVE: Refinement[float] = Refinement(
    name="positive",
    check=lambda n: n > 0,
    message="Must be greater than zero.",
)


@dataclass(frozen=True, eq=False)
class _NumberBase(Refinable[float]):
    refinements: tuple[Refinement[float], ...] = ()

    def positive(self) -> Self:
        """Also reject values <= 0. Zero is not positive."""
        return self._refine(_POSITIVE)

    def optional(self) -> OptionalNumberValidator:
        return OptionalNumberValidator(refinements=self.refinements)

    def _base_parse(self, value: object) -> float:
        if not is_number(value):
            raise TypeMismatch(
                "Must be a number.", expected="number", received=describe_kind(value)
            )
        return self._apply_refinements(value)  # type: ignore[arg-type]


class NumberValidator(Required[float], _NumberBase):
    pass


class OptionalNumberValidator(Optional[float], _NumberBase):
    pass


def number() -> NumberValidator:
    return NumberValidator()

"""Array validator: a list or tuple whose every element passes one validator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Self, TypeVar

from shapectl.validator.base import Optional, Refinable, Refinement, Required, Validator
from shapectl.validator.errors import FieldFailure, TypeMismatch, ValidationError
from shapectl.validator.kinds import describe_kind, is_array

E = TypeVar("E")

_NON_EMPTY: Refinement[list[Any]] = Refinement(
    name="non_empty",
    check=lambda items: len(items) > 0,
    message="Must be a non-empty array.",
)


@dataclass(frozen=True, eq=False)
class _ArrayBase(Refinable[list[E]], Generic[E]):
    element: Validator[E]
    refinements: tuple[Refinement[list[E]], ...] = ()

    def __post_init__(self) -> None:
        if not callable(getattr(self.element, "parse", None)):
            msg = f"array() needs an element validator, got {type(self.element).__name__}"
            raise TypeError(msg)

    def non_empty(self) -> Self:
        return self._refine(_NON_EMPTY)

    def optional(self) -> OptionalArrayValidator[E]:
        return OptionalArrayValidator(self.element, self.refinements)

    def _base_parse(self, value: object) -> list[E]:
        if not is_array(value):
            raise TypeMismatch(
                "Must be an array.", expected="array", received=describe_kind(value)
            )
        items: list[E] = []
        for index, item in enumerate(value):  # type: ignore[arg-type]
            try:
                items.append(self.element.parse(item))
            except ValidationError as exc:
                raise FieldFailure(index, exc) from exc
        return self._apply_refinements(items)


class ArrayValidator(Required[list[E]], _ArrayBase[E]):
    pass


class OptionalArrayValidator(Optional[list[E]], _ArrayBase[E]):
    pass


def array(element: Validator[E]) -> ArrayValidator[E]:
    return ArrayValidator(element)

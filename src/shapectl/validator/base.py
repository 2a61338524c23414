"""Validator contract and the required/optional dual hierarchy.

Each validator kind defines a private base holding its configuration and a
single ``_base_parse`` routine. Two public variants sit on top of it:

- ``XValidator(Required, _XBase)`` returns ``T``;
- ``OptionalXValidator(Optional, _XBase)`` returns ``T | Absent``.

Which variant you hold decides optionality; there is no runtime flag.

INVARIANT: validators are frozen. ``optional()`` and refinement methods
build new instances and never mutate the receiver.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Generic, Self, TypeVar

from shapectl.validator.absent import ABSENT, Absent
from shapectl.validator.errors import RefinementFailure

T = TypeVar("T")


@dataclass(frozen=True)
class Refinement(Generic[T]):
    """A predicate layered after a base type check."""

    name: str
    check: Callable[[T], bool]
    message: str

    def apply(self, value: T) -> T:
        if not self.check(value):
            raise RefinementFailure(self.message, refinement=self.name)
        return value


class Validator(ABC, Generic[T]):
    """Immutable description of what a valid ``T`` looks like."""

    @abstractmethod
    def parse(self, value: object) -> T:
        """Return *value* narrowed to ``T`` or raise ``ValidationError``."""
        ...

    @abstractmethod
    def optional(self) -> Validator[T | Absent]:
        """Return a new validator that also accepts ``ABSENT``."""
        ...


class BaseValidator(Validator[T]):
    """Holds the shared check every variant of a kind runs."""

    @abstractmethod
    def _base_parse(self, value: object) -> T: ...


class Required(BaseValidator[T]):
    """Variant whose result is always present."""

    def parse(self, value: object) -> T:
        return self._base_parse(value)


class Optional(BaseValidator[T]):
    """Variant that short-circuits on ``ABSENT`` before the shared check.

    ``None`` is not absence; it still goes through the base check.
    """

    def parse(self, value: object) -> T | Absent:  # type: ignore[override]
        if value is ABSENT:
            return ABSENT
        return self._base_parse(value)


class Refinable(BaseValidator[T]):
    """Mixin for kinds carrying an ordered tuple of refinements.

    Concrete bases declare the ``refinements`` dataclass field.
    """

    refinements: tuple[Refinement[T], ...]

    def _refine(self, refinement: Refinement[T]) -> Self:
        return replace(self, refinements=(*self.refinements, refinement))

    def _apply_refinements(self, value: T) -> T:
        for refinement in self.refinements:
            value = refinement.apply(value)
        return value

"""Closed-shape object validator.

``object({"a": number(), "b": string().optional()})`` accepts a mapping
with at most the declared keys and returns a new dict holding exactly the
declared fields. Declared fields that were not provided map to ``ABSENT``.

Parsing is fail-fast:

1. the input must be a ``Mapping``;
2. the first key not in the field map raises ``UnexpectedKey``;
3. fields are parsed in declaration order and the first failure raises
   ``FieldFailure`` carrying the field trail.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from shapectl.validator.absent import ABSENT
from shapectl.validator.base import BaseValidator, Optional, Required, Validator
from shapectl.validator.errors import (
    FieldFailure,
    TypeMismatch,
    UnexpectedKey,
    ValidationError,
)
from shapectl.validator.kinds import describe_kind

FieldMap = Mapping[str, Validator[Any]]


@dataclass(frozen=True, eq=False)
class _ObjectBase(BaseValidator[dict[str, Any]]):
    fields: FieldMap = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.fields, Mapping):
            msg = f"object() fields must be a mapping, got {type(self.fields).__name__}"
            raise TypeError(msg)
        for name, validator in self.fields.items():
            if not isinstance(name, str):
                msg = f"object() field names must be strings, got {name!r}"
                raise TypeError(msg)
            if not callable(getattr(validator, "parse", None)):
                msg = f"object() field {name!r} is not a validator"
                raise TypeError(msg)
        # Read-only copy: later edits to the caller's dict never leak in.
        super().__setattr__("fields", MappingProxyType(dict(self.fields)))

    def optional(self) -> OptionalObjectValidator:
        return OptionalObjectValidator(self.fields)

    def _base_parse(self, value: object) -> dict[str, Any]:
        if not isinstance(value, Mapping):
            raise TypeMismatch(
                "Must be an object.", expected="object", received=describe_kind(value)
            )

        for key in value:
            if key not in self.fields:
                raise UnexpectedKey(key)

        result: dict[str, Any] = {}
        for name, validator in self.fields.items():
            try:
                result[name] = validator.parse(value.get(name, ABSENT))
            except ValidationError as exc:
                raise FieldFailure(name, exc) from exc
        return result


class ObjectValidator(Required[dict[str, Any]], _ObjectBase):
    pass


class OptionalObjectValidator(Optional[dict[str, Any]], _ObjectBase):
    pass


def object(fields: FieldMap | None = None) -> ObjectValidator:  # noqa: A001
    return ObjectValidator(fields if fields is not None else {})

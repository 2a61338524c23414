"""Composable runtime validators for untrusted, loosely-typed input.

Build a schema once, then ``parse`` any number of unknown values::

    from shapectl import validator as v

    Clock = v.object({
        "type": v.literal("clock"),
        "width": v.number().positive(),
        "format": v.string().non_empty().optional(),
        "on_click": v.fn().optional(),
    })
    params = Clock.parse(raw_config)

This layer depends only on the stdlib. It must never import from services,
infrastructure, commands, or config.
"""

from shapectl.validator.absent import ABSENT, Absent
from shapectl.validator.array import ArrayValidator, OptionalArrayValidator, array
from shapectl.validator.base import Refinement, Validator
from shapectl.validator.boolean import BooleanValidator, OptionalBooleanValidator, boolean
from shapectl.validator.errors import (
    FieldFailure,
    LiteralMismatch,
    RefinementFailure,
    TypeMismatch,
    UnexpectedKey,
    ValidationError,
)
from shapectl.validator.function import FunctionValidator, OptionalFunctionValidator, fn
from shapectl.validator.kinds import describe_kind
from shapectl.validator.literal import LiteralValidator, OptionalLiteralValidator, literal
from shapectl.validator.number import NumberValidator, OptionalNumberValidator, number
from shapectl.validator.object import ObjectValidator, OptionalObjectValidator, object
from shapectl.validator.string import OptionalStringValidator, StringValidator, string

__all__ = [
    "ABSENT",
    "Absent",
    "ArrayValidator",
    "BooleanValidator",
    "FieldFailure",
    "FunctionValidator",
    "LiteralMismatch",
    "LiteralValidator",
    "NumberValidator",
    "ObjectValidator",
    "OptionalArrayValidator",
    "OptionalBooleanValidator",
    "OptionalFunctionValidator",
    "OptionalLiteralValidator",
    "OptionalNumberValidator",
    "OptionalObjectValidator",
    "OptionalStringValidator",
    "Refinement",
    "RefinementFailure",
    "StringValidator",
    "TypeMismatch",
    "UnexpectedKey",
    "ValidationError",
    "Validator",
    "array",
    "boolean",
    "describe_kind",
    "fn",
    "literal",
    "number",
    "object",
    "string",
]

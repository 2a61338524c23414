"""Function validator for user-supplied callbacks.

The callable is returned as-is: no wrapping, no arity check, never invoked.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from shapectl.validator.base import BaseValidator, Optional, Required
from shapectl.validator.errors import TypeMismatch
from shapectl.validator.kinds import describe_kind

AnyCallable = Callable[..., Any]


@dataclass(frozen=True, eq=False)
class _FunctionBase(BaseValidator[AnyCallable]):
    def optional(self) -> OptionalFunctionValidator:
        return OptionalFunctionValidator()

    def _base_parse(self, value: object) -> AnyCallable:
        if not callable(value):
            raise TypeMismatch(
                "Must be a function.", expected="function", received=describe_kind(value)
            )
        return value


class FunctionValidator(Required[AnyCallable], _FunctionBase):
    pass


class OptionalFunctionValidator(Optional[AnyCallable], _FunctionBase):
    pass


def fn() -> FunctionValidator:
    return FunctionValidator()

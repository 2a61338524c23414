"""Validation error hierarchy.

Every failure raised by ``parse`` is a :class:`ValidationError`. Nested
failures are wrapped in :class:`FieldFailure` so the full field trail
(``apps[0].bundleId``) survives to the caller.

INVARIANT: validators raise, they never return a failure sentinel.
"""

from __future__ import annotations

from typing import ClassVar

PathSegment = str | int


def format_path(path: tuple[PathSegment, ...]) -> str:
    """Render a field trail: names joined by dots, indices in brackets."""
    out = ""
    for segment in path:
        if isinstance(segment, int):
            out += f"[{segment}]"
        elif out:
            out += f".{segment}"
        else:
            out = segment
    return out


class ValidationError(ValueError):
    """Base class for every parse failure.

    Attributes:
        message: Human-readable description of the leaf problem.
        path: Field trail from the root value down to the failure.
    """

    code: ClassVar[str] = "VALIDATION_ERROR"

    def __init__(self, message: str, *, path: tuple[PathSegment, ...] = ()) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    @property
    def path_str(self) -> str:
        return format_path(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.path_str}: {self.message}"
        return self.message


class TypeMismatch(ValidationError):
    """The input's runtime kind is not the kind the validator expects."""

    code: ClassVar[str] = "TYPE_MISMATCH"

    def __init__(self, message: str, *, expected: str, received: str) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received


class LiteralMismatch(ValidationError):
    """Same kind as the expected literal, different value."""

    code: ClassVar[str] = "LITERAL_MISMATCH"

    def __init__(self, message: str, *, expected: object, received: object) -> None:
        super().__init__(message)
        self.expected = expected
        self.received = received


class RefinementFailure(ValidationError):
    """The value passed the base type check but not an attached refinement."""

    code: ClassVar[str] = "REFINEMENT_FAILURE"

    def __init__(self, message: str, *, refinement: str) -> None:
        super().__init__(message)
        self.refinement = refinement


class UnexpectedKey(ValidationError):
    """An object input carries a key its closed schema does not declare."""

    code: ClassVar[str] = "UNEXPECTED_KEY"

    def __init__(self, key: object) -> None:
        super().__init__(f"Unexpected key found: {key}")
        self.key = key


class FieldFailure(ValidationError):
    """A nested field or array element failed.

    ``message`` and ``code`` come from the innermost failure. ``path`` is
    prefixed with this field so wrapping composes at every nesting level.
    """

    def __init__(self, field: PathSegment, cause: ValidationError) -> None:
        super().__init__(cause.message, path=(field, *cause.path))
        self.field = field
        self.cause = cause

    @property
    def leaf(self) -> ValidationError:
        error: ValidationError = self
        while isinstance(error, FieldFailure):
            error = error.cause
        return error

    @property
    def code(self) -> str:  # type: ignore[override]
        return self.leaf.code

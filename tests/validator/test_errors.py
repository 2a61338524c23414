"""Tests for the ValidationError hierarchy and path formatting."""

from __future__ import annotations

import pytest

from shapectl.validator import (
    FieldFailure,
    LiteralMismatch,
    RefinementFailure,
    TypeMismatch,
    UnexpectedKey,
    ValidationError,
)
from shapectl.validator.errors import format_path


class TestFormatPath:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ((), ""),
            (("apps",), "apps"),
            (("apps", 0, "bundleId"), "apps[0].bundleId"),
            ((2,), "[2]"),
            ((0, 1, "a"), "[0][1].a"),
        ],
    )
    def test_format(self, path: tuple[str | int, ...], expected: str) -> None:
        """Names join with dots, indexes use brackets."""
        assert format_path(path) == expected


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls", [TypeMismatch, LiteralMismatch, RefinementFailure, UnexpectedKey, FieldFailure]
    )
    def test_subclasses_validation_error(self, cls: type) -> None:
        """Every failure kind is a ValidationError."""
        assert issubclass(cls, ValidationError)

    def test_is_value_error(self) -> None:
        """ValidationError can be caught as ValueError."""
        assert issubclass(ValidationError, ValueError)

    def test_codes(self) -> None:
        """Each failure kind carries a stable code."""
        assert TypeMismatch.code == "TYPE_MISMATCH"
        assert LiteralMismatch.code == "LITERAL_MISMATCH"
        assert RefinementFailure.code == "REFINEMENT_FAILURE"
        assert UnexpectedKey.code == "UNEXPECTED_KEY"


class TestFieldFailure:
    def test_wraps_and_prefixes_path(self) -> None:
        """Wrapping prepends the field to the cause path."""
        leaf = TypeMismatch("Must be a number.", expected="number", received="string")
        inner = FieldFailure("size", leaf)
        outer = FieldFailure("icon", inner)
        assert outer.path == ("icon", "size")
        assert outer.message == "Must be a number."
        assert outer.leaf is leaf
        assert outer.code == "TYPE_MISMATCH"
        assert str(outer) == "icon.size: Must be a number."

    def test_root_error_str_is_message(self) -> None:
        """Errors at the root print only the message."""
        assert str(UnexpectedKey("x")) == "Unexpected key found: x"

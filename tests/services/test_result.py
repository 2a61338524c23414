"""Tests for CheckResult and CheckError."""

from __future__ import annotations

import json

import pytest

from shapectl.services.result import CheckError, CheckResult
from shapectl.validator import FieldFailure, TypeMismatch, UnexpectedKey


class TestCheckError:
    def test_from_root_exception(self) -> None:
        error = CheckError.from_exception(UnexpectedKey("typo"))
        assert error.code == "UNEXPECTED_KEY"
        assert error.path == ""
        assert error.describe() == "Unexpected key found: typo"

    def test_from_field_failure(self) -> None:
        leaf = TypeMismatch("Must be a string.", expected="string", received="number")
        exc = FieldFailure("apps", FieldFailure(0, FieldFailure("bundleId", leaf)))
        error = CheckError.from_exception(exc)
        assert error.code == "TYPE_MISMATCH"
        assert error.path == "apps[0].bundleId"
        assert error.describe() == "apps[0].bundleId: Must be a string."


class TestCheckResult:
    def test_success_construction(self) -> None:
        result = CheckResult(ok=True, name="clock", value={"width": 1})
        assert result.errors == []
        assert result.expected == []
        assert result.warnings == []
        assert result.messages == []

    def test_json_serialization(self) -> None:
        result = CheckResult(
            ok=False,
            name="clock",
            errors=[CheckError(code="TYPE_MISMATCH", message="Must be a number.", path="width")],
            expected=["{ width = <number> }"],
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["errors"][0]["path"] == "width"
        assert parsed["expected"] == ["{ width = <number> }"]

    def test_frozen(self) -> None:
        result = CheckResult(ok=True, name="x")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]

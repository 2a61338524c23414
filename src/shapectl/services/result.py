"""CheckResult and CheckError — the contract between checks and their callers.

INVARIANT: check-service functions return CheckResult and never raise
ValidationError. The CLI and any embedding host consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from shapectl.validator.errors import ValidationError


class CheckError(BaseModel):
    """One problem found in a checked value."""

    model_config = {"frozen": True}

    code: str
    message: str
    path: str = ""

    @classmethod
    def from_exception(cls, exc: ValidationError) -> CheckError:
        return cls(code=exc.code, message=exc.message, path=exc.path_str)

    def describe(self) -> str:
        """``apps[0].bundleId: Must be a non-empty string.``"""
        if self.path:
            return f"{self.path}: {self.message}"
        return self.message


class CheckResult(BaseModel):
    """Outcome of checking one named config value.

    Attributes:
        ok: Whether the value matched its schema.
        name: What was checked (widget name, section, file).
        value: The narrowed value on success, None otherwise.
        errors: Problems found; empty when ``ok``.
        expected: Usage hint lines shown to the user on failure.
        warnings: Non-fatal notes.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    ok: bool
    name: str
    value: Any = None
    errors: list[CheckError] = Field(default_factory=list)
    expected: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [error.describe() for error in self.errors]

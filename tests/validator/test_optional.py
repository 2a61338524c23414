"""Cross-kind properties of the optional combinator and reusability."""

from __future__ import annotations

from typing import Any

import pytest

from shapectl.validator import (
    ABSENT,
    ValidationError,
    Validator,
    array,
    boolean,
    fn,
    literal,
    number,
    object,
    string,
)


def _callback() -> None:
    return None


# (validator, an input it accepts, an input it rejects)
CASES: list[tuple[str, Validator[Any], Any, Any]] = [
    ("literal", literal("left"), "left", "right"),
    ("number", number().positive(), 3, 0),
    ("string", string().non_empty(), "x", ""),
    ("boolean", boolean(), True, 1),
    ("function", fn(), _callback, "callback"),
    ("array", array(number()), [1, 2], [1, "2"]),
    ("object", object({"a": number()}), {"a": 1}, {"a": 1, "b": 2}),
]
IDS = [case[0] for case in CASES]


class TestOptionalCombinator:
    @pytest.mark.parametrize("kind,schema,good,bad", CASES, ids=IDS)
    def test_same_result_as_required(
        self, kind: str, schema: Validator[Any], good: Any, bad: Any
    ) -> None:
        """Present values parse the same in both variants."""
        assert schema.optional().parse(good) == schema.parse(good)

    @pytest.mark.parametrize("kind,schema,good,bad", CASES, ids=IDS)
    def test_accepts_absent(self, kind: str, schema: Validator[Any], good: Any, bad: Any) -> None:
        """Every optional variant returns ABSENT for ABSENT."""
        assert schema.optional().parse(ABSENT) is ABSENT

    @pytest.mark.parametrize("kind,schema,good,bad", CASES, ids=IDS)
    def test_still_rejects_bad_input(
        self, kind: str, schema: Validator[Any], good: Any, bad: Any
    ) -> None:
        """Optional never loosens the base check."""
        with pytest.raises(ValidationError):
            schema.optional().parse(bad)

    @pytest.mark.parametrize("kind,schema,good,bad", CASES, ids=IDS)
    def test_required_rejects_absent(
        self, kind: str, schema: Validator[Any], good: Any, bad: Any
    ) -> None:
        """Required variants reject ABSENT."""
        with pytest.raises(ValidationError):
            schema.parse(ABSENT)

    @pytest.mark.parametrize("kind,schema,good,bad", CASES, ids=IDS)
    def test_optional_is_new_instance(
        self, kind: str, schema: Validator[Any], good: Any, bad: Any
    ) -> None:
        """optional() never mutates the receiver."""
        optional = schema.optional()
        assert optional is not schema
        assert type(optional) is not type(schema)


class TestReusability:
    @pytest.mark.parametrize("kind,schema,good,bad", CASES, ids=IDS)
    def test_order_independent(
        self, kind: str, schema: Validator[Any], good: Any, bad: Any
    ) -> None:
        """Parsing order does not change results."""
        first = schema.parse(good)
        with pytest.raises(ValidationError):
            schema.parse(bad)
        assert schema.parse(good) == first
        with pytest.raises(ValidationError):
            schema.parse(bad)

    def test_shared_base_builds_independent_variants(self) -> None:
        """Variants built from one base stay independent."""
        base = number()
        positive = base.positive()
        optional = base.optional()
        assert base.parse(-1) == -1
        assert optional.parse(-1) == -1
        with pytest.raises(ValidationError):
            positive.parse(-1)

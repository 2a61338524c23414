"""Configuration checks — the boundary between validators and their hosts.

A host (a widget builder, a panel layout, the CLI) hands over raw config
and gets back a :class:`CheckResult`. One bad section never stops the
others from being checked, and a failed check can be swapped for an inert
fallback via :func:`check_or_fallback`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from shapectl.services.result import CheckError, CheckResult
from shapectl.validator.absent import ABSENT
from shapectl.validator.base import Validator
from shapectl.validator.errors import UnexpectedKey, ValidationError
from shapectl.validator.kinds import describe_kind

logger = logging.getLogger(__name__)

R = TypeVar("R")


def check_config(
    name: str,
    schema: Validator[Any],
    raw: object,
    *,
    expected: Sequence[str] = (),
) -> CheckResult:
    """Parse *raw* with *schema*, reporting failure as a result.

    Args:
        name: Label for logs and output (e.g. the widget name).
        schema: Validator to apply.
        raw: Untrusted input.
        expected: Usage lines shown to the user when the check fails.
    """
    try:
        value = schema.parse(raw)
    except ValidationError as exc:
        logger.info("Invalid config for %s: %s", name, exc)
        return CheckResult(
            ok=False,
            name=name,
            errors=[CheckError.from_exception(exc)],
            expected=list(expected),
        )
    logger.debug("Config for %s is valid", name)
    return CheckResult(ok=True, name=name, value=value)


def check_sections(
    document: object,
    schemas: Mapping[str, Validator[Any]],
) -> dict[str, CheckResult]:
    """Check each top-level section of *document* independently.

    A section the document omits is checked as ``ABSENT``. A section no
    schema declares yields a failed result: the document is a closed shape.
    """
    if not isinstance(document, Mapping):
        message = f"Must be an object, got {describe_kind(document)}."
        return {"<document>": document_failure("<document>", "TYPE_MISMATCH", message)}

    results = {
        name: check_config(name, schema, document.get(name, ABSENT))
        for name, schema in schemas.items()
    }
    for key in document:
        if key not in schemas:
            # Non-string keys (YAML ints, booleans) are bracketed so they
            # cannot land on a declared section name.
            label = key if isinstance(key, str) else f"[{key!r}]"
            exc = UnexpectedKey(key)
            logger.info("Unexpected section: %s", label)
            results[label] = CheckResult(
                ok=False, name=label, errors=[CheckError.from_exception(exc)]
            )
    return results


def check_or_fallback(
    name: str,
    schema: Validator[Any],
    raw: object,
    *,
    build: Callable[[Any], R],
    fallback: Callable[[CheckResult], R],
    expected: Sequence[str] = (),
) -> R:
    """Build from the narrowed value, or hand the failed result to *fallback*.

    This is the "noop widget" pattern: a single misconfigured item is
    replaced by an inert stand-in that can display the diagnostic.
    """
    result = check_config(name, schema, raw, expected=expected)
    if result.ok:
        return build(result.value)
    return fallback(result)


def prune_absent(value: Any) -> Any:
    """Drop ``ABSENT`` entries from nested dicts and lists, for display."""
    if isinstance(value, dict):
        return {k: prune_absent(v) for k, v in value.items() if v is not ABSENT}
    if isinstance(value, list):
        return [prune_absent(item) for item in value if item is not ABSENT]
    return value


def document_failure(name: str, code: str, message: str) -> CheckResult:
    """Failed result for problems found before any schema ran."""
    logger.info("Cannot check %s: %s", name, message)
    return CheckResult(ok=False, name=name, errors=[CheckError(code=code, message=message)])

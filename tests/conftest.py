"""Shared pytest fixtures for shapectl tests."""

from __future__ import annotations

import logging
import sys
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

SCHEMA_MODULE = "shapectl_test_schemas"

SCHEMA_SOURCE = '''\
from shapectl import validator as v

Clock = v.object({
    "type": v.literal("clock"),
    "width": v.number().positive(),
    "format": v.string().non_empty().optional(),
})

Launcher = v.object({
    "bundleId": v.string().non_empty(),
    "args": v.array(v.string()).optional(),
})


class Panel:
    clock = Clock
    launcher = Launcher


Document = v.object({
    "clock": Clock,
    "launchers": v.array(Launcher).optional(),
})

NOT_A_SCHEMA = {"type": "clock"}
'''


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def schema_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    """Write an importable schema module into tmp_path and return its name."""
    (tmp_path / f"{SCHEMA_MODULE}.py").write_text(SCHEMA_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    monkeypatch.delitem(sys.modules, SCHEMA_MODULE, raising=False)
    return SCHEMA_MODULE


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp dir with no shapectl env overrides."""
    monkeypatch.chdir(tmp_path)
    for var in ("SHAPECTL_CONFIG", "SHAPECTL_SCHEMA_REF", "SHAPECTL_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI calls configure_logging(), which replaces root handlers.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    shape = logging.getLogger("shapectl")
    shape_level = shape.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    shape.setLevel(shape_level)

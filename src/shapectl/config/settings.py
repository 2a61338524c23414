"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``SHAPECTL_*`` prefix
  3. TOML file    — ``shapectl.toml`` or ``[tool.shapectl]``, found by walk-up
  4. Code defaults

A minimal ``shapectl.toml`` names the default schema::

    schema_ref = "myapp.config_schema:Panel"
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from shapectl.config.discovery import find_config, read_settings_table


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from ``shapectl.toml`` or ``[tool.shapectl]`` in ``pyproject.toml``."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = read_settings_table(toml_path)
            except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, False

    def __call__(self) -> dict[str, Any]:
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class ShapeSettings(BaseSettings):
    """Settings for the shapectl CLI, frozen after construction.

    Attributes:
        config_path: The ``shapectl.toml`` that was loaded, if any.
        schema_ref: Default ``module:attribute`` schema reference for ``check``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "SHAPECTL_",
        "extra": "ignore",
    }

    config_path: Path | None = None
    schema_ref: str | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> ShapeSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers ``shapectl.toml``
        by walking up from *start* (default: cwd). CLI flags win over
        everything else.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                msg = f"Config file not found: {config_path}"
                raise click.ClickException(msg)
            toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None

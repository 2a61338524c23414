"""Command: check a config document against a schema."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from shapectl.commands._base import ShapeCommand

if TYPE_CHECKING:
    from shapectl.commands._context import AppContext


@click.command(
    cls=ShapeCommand,
    examples="""\
  shapectl check panel.toml --schema myapp.schemas:Panel
  shapectl check panel.yaml --schema myapp.schemas:Clock --section clock
  shapectl --json check widgets.json --schema myapp.schemas:Widgets
  shapectl check panel.toml            # schema_ref from shapectl.toml""",
)
@click.argument("document", type=click.Path(path_type=Path))
@click.option(
    "-s",
    "--schema",
    "schema_ref",
    default=None,
    help="Schema reference as 'module:attribute'.",
)
@click.option("--section", default=None, help="Check only this top-level section.")
@click.pass_obj
def check(
    app: AppContext,
    document: Path,
    schema_ref: str | None,
    section: str | None,
) -> None:
    """Check DOCUMENT (JSON, TOML or YAML) against a closed-shape schema."""
    from shapectl.infrastructure.documents import DocumentError, load_document
    from shapectl.infrastructure.schema_ref import SchemaRefError, resolve_schema
    from shapectl.services.check import check_config, document_failure
    from shapectl.validator.absent import ABSENT
    from shapectl.validator.kinds import describe_kind

    ref = schema_ref or app.settings.schema_ref
    if not ref:
        msg = "No schema given. Pass --schema or set schema_ref in shapectl.toml."
        raise click.UsageError(msg)

    name = document.name if section is None else f"{document.name}:{section}"

    try:
        schema = resolve_schema(ref)
        raw = load_document(document)
    except (SchemaRefError, DocumentError) as exc:
        app.emit(document_failure(name, "LOAD_ERROR", str(exc)))
        return

    if section is not None:
        if not isinstance(raw, dict):
            message = f"Must be an object to select a section, got {describe_kind(raw)}."
            app.emit(document_failure(name, "TYPE_MISMATCH", message))
            return
        raw = raw.get(section, ABSENT)

    app.emit(check_config(name, schema, raw))

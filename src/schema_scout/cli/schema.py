"""Schema file maintenance commands."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from schema_scout.core.introspect import load_schema_document
from schema_scout.core.report import DEFAULT_OPTIONS
from schema_scout.sources import get_schema_source

schema_app = typer.Typer(help="Inspect and prepare the schema file.")
console = Console()

SchemaOption = Annotated[
    Path | None,
    typer.Option(envvar="SCHEMA_SCOUT_SCHEMA_PATH", help="Path to the introspection JSON file."),
]


@schema_app.command("prepare")
def prepare(schema: SchemaOption = None) -> None:
    """Decompress the gzip-compressed schema next to its JSON path if needed."""
    source = get_schema_source(schema)
    try:
        written = source.ensure_decompressed()
    except (OSError, EOFError) as exc:
        console.print(f"[red]Could not decompress {source.compressed_path}: {exc}[/red]")
        raise typer.Exit(1) from exc

    if written:
        console.print(f"[green]Saved uncompressed schema to {source.path}[/green]")
    elif source.path.exists():
        console.print(f"Schema already available at {source.path}")
    else:
        console.print(f"[red]Neither {source.path} nor {source.compressed_path} exists.[/red]")
        raise typer.Exit(1)


@schema_app.command("stats")
def stats(schema: SchemaOption = None) -> None:
    """Show how many types, queries and mutations the schema declares."""
    source = get_schema_source(schema)
    try:
        document = load_schema_document(source)
    except (OSError, EOFError, ValueError) as exc:
        console.print(f"[red]Error processing GraphQL schema: {exc}[/red]")
        raise typer.Exit(1) from exc

    descriptor = document.schema_descriptor
    query_root = descriptor.find_type(DEFAULT_OPTIONS.query_root)
    mutation_root = descriptor.find_type(DEFAULT_OPTIONS.mutation_root)

    table = Table(show_lines=False)
    table.add_column("section")
    table.add_column("count", justify="right")
    table.add_row("types", str(len(document.types)))
    table.add_row("queries", str(len(query_root.fields or []) if query_root else 0))
    table.add_row("mutations", str(len(mutation_root.fields or []) if mutation_root else 0))
    console.print(table)

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from schema_scout.core.introspect import introspect_schema
from schema_scout.core.report import SECTION_NAMES, SearchOptions
from schema_scout.sources import get_schema_source

console = Console()
err_console = Console(stderr=True)


def search(
    query: Annotated[str, typer.Argument(help="Search term, e.g. 'product'. Empty lists every type.")] = "",
    filter: Annotated[
        list[str] | None,
        typer.Option("--filter", "-f", help="Section to show: all, types, queries or mutations. Repeatable."),
    ] = None,
    max_results: Annotated[int, typer.Option(help="Max types, queries and mutations per section.")] = 10,
    schema: Annotated[
        Path | None,
        typer.Option(envvar="SCHEMA_SCOUT_SCHEMA_PATH", help="Path to the introspection JSON file."),
    ] = None,
) -> None:
    """Search the schema and print the matching types, queries and mutations."""
    sections = filter or ["all"]
    unknown = sorted(set(sections) - set(SECTION_NAMES))
    if unknown:
        err_console.print(f"[red]Unknown section(s): {', '.join(unknown)}[/red]")
        raise typer.Exit(2)

    options = SearchOptions(max_top_level=max_results)
    outcome = introspect_schema(get_schema_source(schema), query, sections, options)
    if not outcome.success:
        err_console.print(f"[red]Error processing GraphQL schema: {outcome.error}[/red]")
        raise typer.Exit(1)
    console.print(outcome.response_text, markup=False, highlight=False, soft_wrap=True)

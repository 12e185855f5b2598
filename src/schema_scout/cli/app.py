import logging
import sys
from typing import Annotated

import typer

from schema_scout.cli.schema import schema_app
from schema_scout.cli.search import search
from schema_scout.cli.serve import serve_app

app = typer.Typer(
    name="schema-scout",
    help="Schema Scout CLI: search GraphQL introspection schemas.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback()
def configure(
    log_level: Annotated[str, typer.Option(help="Logging level written to stderr.")] = "WARNING",
) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


app.command("search")(search)
app.add_typer(schema_app, name="schema")
app.add_typer(serve_app, name="serve")


def main() -> None:
    app()

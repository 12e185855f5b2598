from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

serve_app = typer.Typer(help="Start servers.")
console = Console(stderr=True)


@serve_app.command("api")
def api(
    host: str = "127.0.0.1",
    port: int = 8000,
) -> None:
    """Start the FastAPI REST API server."""
    import uvicorn

    from schema_scout.api.app import create_app

    app = create_app()
    console.print(f"[green]Starting API server on {host}:{port}[/green]")
    uvicorn.run(app, host=host, port=port)


@serve_app.command("mcp")
def mcp(
    transport: str = "stdio",
    host: str = "127.0.0.1",
    port: int = 8002,
    schema: Annotated[
        Path | None,
        typer.Option(envvar="SCHEMA_SCOUT_SCHEMA_PATH", help="Path to the introspection JSON file."),
    ] = None,
) -> None:
    """Start the MCP server."""
    from schema_scout.mcp.server import create_mcp_server
    from schema_scout.settings import get_docs_base_url
    from schema_scout.sources import get_schema_source

    server = create_mcp_server(get_schema_source(schema), docs_base_url=get_docs_base_url())
    console.print(f"[green]Starting MCP server (transport: {transport})[/green]")
    if transport == "stdio":
        server.run(transport="stdio")
    else:
        server.run(transport=transport, host=host, port=port)  # type: ignore[arg-type]

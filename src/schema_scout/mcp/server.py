"""FastMCP server exposing schema-scout tools and prompts."""

from __future__ import annotations

from typing import Annotated, Literal

import httpx
from anyio import to_thread
from fastmcp import FastMCP
from pydantic import Field

from schema_scout.core.introspect import introspect_schema
from schema_scout.core.ports.schema_source import SchemaSource
from schema_scout.core.report import DEFAULT_OPTIONS, SearchOptions
from schema_scout.docs.client import search_docs as _search_docs
from schema_scout.mcp.prompts import graphql_operation_prompt

SectionFilter = Literal["all", "types", "queries", "mutations"]


def create_mcp_server(
    source: SchemaSource,
    docs_base_url: str | None = None,
    options: SearchOptions = DEFAULT_OPTIONS,
) -> FastMCP:
    """Create a FastMCP server wired to the given schema source."""

    mcp = FastMCP(
        "schema-scout",
        instructions="Search a GraphQL introspection schema and get compact, readable excerpts.",
    )

    @mcp.tool()
    async def introspect_admin_schema(
        query: Annotated[
            str,
            Field(description="Search term to filter schema elements by name, e.g. 'product' or 'order'."),
        ],
        filter: Annotated[
            list[SectionFilter] | None,
            Field(description="Sections to show: 'types', 'queries', 'mutations' or 'all' (default)."),
        ] = None,
    ) -> str:
        """Return the portion of the GraphQL schema whose type, query or mutation names match the search term."""
        outcome = await to_thread.run_sync(introspect_schema, source, query, filter or ["all"], options)
        if outcome.success:
            return outcome.response_text
        return f"Error processing GraphQL schema: {outcome.error}. Make sure the schema file exists."

    if docs_base_url:

        @mcp.tool()
        async def search_docs(
            prompt: Annotated[str, Field(description="The search query for the documentation.")],
        ) -> str:
            """Search the API documentation."""
            try:
                return await _search_docs(prompt, docs_base_url)
            except httpx.HTTPError as exc:
                return f"Error searching documentation: {exc}"

    @mcp.prompt()
    def graphql_operation(
        query: Annotated[str, Field(description="The specific API question or request.")],
    ) -> str:
        """Ask for a complete GraphQL operation that fulfils a request."""
        return graphql_operation_prompt(query)

    return mcp

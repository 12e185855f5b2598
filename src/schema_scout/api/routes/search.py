from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from schema_scout.api.dependencies import get_schema_source
from schema_scout.api.schemas import SearchResponse
from schema_scout.core.introspect import introspect_schema
from schema_scout.core.ports.schema_source import SchemaSource
from schema_scout.core.report import SearchOptions

router = APIRouter(tags=["search"])


@router.get("/search", response_model=SearchResponse)
def search(
    query: str = Query(""),
    filter: list[Literal["all", "types", "queries", "mutations"]] = Query(["all"]),
    max_results: int = Query(10, ge=1),
    source: SchemaSource = Depends(get_schema_source),
) -> SearchResponse:
    outcome = introspect_schema(source, query, filter, SearchOptions(max_top_level=max_results))
    if not outcome.success:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=outcome.error)
    report = outcome.report
    return SearchResponse(
        text=report.text,
        types_truncated=report.types_truncated,
        queries_truncated=report.queries_truncated,
        mutations_truncated=report.mutations_truncated,
        type_matches=report.type_matches,
        query_matches=report.query_matches,
        mutation_matches=report.mutation_matches,
    )

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"


class SearchResponse(BaseModel):
    text: str
    types_truncated: bool
    queries_truncated: bool
    mutations_truncated: bool
    type_matches: int
    query_matches: int
    mutation_matches: int

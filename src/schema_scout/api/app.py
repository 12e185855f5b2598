from __future__ import annotations

from fastapi import FastAPI

from schema_scout.api.routes.health import router as health_router
from schema_scout.api.routes.search import router as search_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Schema Scout API",
        description="Search a GraphQL introspection schema and get compact, readable excerpts.",
        version="0.1.0",
    )

    app.include_router(health_router, include_in_schema=False)
    app.include_router(search_router)

    return app

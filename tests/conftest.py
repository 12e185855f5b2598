"""Shared fixtures and helpers for tests."""

from pathlib import Path
from typing import Any

import pytest

from schema_scout.models import SchemaDocument
from schema_scout.sources import InMemorySchemaSource

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Introspection builders
# ---------------------------------------------------------------------------


def scalar(name: str) -> dict[str, Any]:
    return {"kind": "SCALAR", "name": name, "ofType": None}


def non_null(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type: dict[str, Any]) -> dict[str, Any]:
    return {"kind": "LIST", "name": None, "ofType": of_type}


def field(name: str, type_: dict[str, Any] | None = None, **extra: Any) -> dict[str, Any]:
    return {"name": name, "args": [], "type": type_ or scalar("String"), "isDeprecated": False, **extra}


def arg(name: str, type_: dict[str, Any], default: str | None = None) -> dict[str, Any]:
    return {"name": name, "type": type_, "defaultValue": default}


def object_type(name: str, fields: list[dict[str, Any]], **extra: Any) -> dict[str, Any]:
    return {"kind": "OBJECT", "name": name, "fields": fields, **extra}


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sample_schema() -> dict[str, Any]:
    """A small Admin-API-like introspection result."""
    return {
        "data": {
            "__schema": {
                "types": [
                    object_type(
                        "Product",
                        [field("id", scalar("ID")), field("title")],
                        description="A product in the shop",
                    ),
                    {
                        "kind": "INPUT_OBJECT",
                        "name": "ProductInput",
                        "description": "Input for a product",
                        "fields": None,
                        "inputFields": [arg("title", scalar("String"))],
                    },
                    object_type("Order", [field("id", scalar("ID"))], description="An order in the shop"),
                    object_type(
                        "QueryRoot",
                        [
                            field(
                                "product",
                                {"kind": "OBJECT", "name": "Product", "ofType": None},
                                description="Get a product by ID",
                                args=[arg("id", scalar("ID"))],
                            ),
                            field(
                                "order",
                                {"kind": "OBJECT", "name": "Order", "ofType": None},
                                description="Get an order by ID",
                                args=[arg("id", scalar("ID"))],
                            ),
                        ],
                    ),
                    object_type(
                        "Mutation",
                        [
                            field(
                                "productCreate",
                                {"kind": "OBJECT", "name": "Product", "ofType": None},
                                description="Create a product",
                                args=[arg("input", {"kind": "INPUT_OBJECT", "name": "ProductInput", "ofType": None})],
                            ),
                        ],
                    ),
                ],
            },
        },
    }


@pytest.fixture
def sample_document(sample_schema: dict[str, Any]) -> SchemaDocument:
    return SchemaDocument.model_validate(sample_schema)


@pytest.fixture
def in_memory_source(sample_schema: dict[str, Any]) -> InMemorySchemaSource:
    return InMemorySchemaSource(sample_schema)

"""Compose the matching types, queries and mutations of a schema into one text report."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Literal

from schema_scout.core.render import (
    MAX_FIELDS_TO_SHOW,
    OPERATION_DESCRIPTION_LIMIT,
    TYPE_DESCRIPTION_LIMIT,
    render_operation,
    render_type_block,
)
from schema_scout.core.search import Truncated, normalize_query, select_items
from schema_scout.models import FieldDescriptor, SchemaDocument, TypeDescriptor

logger = logging.getLogger(__name__)

SectionName = Literal["all", "types", "queries", "mutations"]

SECTION_NAMES: tuple[SectionName, ...] = ("all", "types", "queries", "mutations")

TYPES_HEADER = "## Matching GraphQL Types:"
QUERIES_HEADER = "## Matching GraphQL Queries:"
MUTATIONS_HEADER = "## Matching GraphQL Mutations:"


@dataclass(frozen=True)
class SearchOptions:
    max_top_level: int = 10
    max_fields_per_type: int = MAX_FIELDS_TO_SHOW
    sections: frozenset[str] = field(default_factory=lambda: frozenset({"all"}))
    type_description_limit: int = TYPE_DESCRIPTION_LIMIT
    operation_description_limit: int = OPERATION_DESCRIPTION_LIMIT
    query_root: str = "QueryRoot"
    mutation_root: str = "Mutation"

    def with_sections(self, sections: Iterable[str]) -> SearchOptions:
        return replace(self, sections=frozenset(sections))

    def includes(self, section: str) -> bool:
        return "all" in self.sections or section in self.sections

    @property
    def truncation_notice(self) -> str:
        return f"(Results limited to {self.max_top_level} items. Refine your search for more specific results.)"


DEFAULT_OPTIONS = SearchOptions()


@dataclass(frozen=True)
class ReportResult:
    text: str
    types_truncated: bool = False
    queries_truncated: bool = False
    mutations_truncated: bool = False
    type_matches: int = 0
    query_matches: int = 0
    mutation_matches: int = 0


def _operations(
    document: SchemaDocument, root_name: str, term: str, options: SearchOptions
) -> Truncated[FieldDescriptor]:
    root = document.schema_descriptor.find_type(root_name)
    if root is None or not root.fields:
        return Truncated(items=[], was_truncated=False, total=0)
    return select_items(root.fields, term, options.max_top_level)


def _section(
    header: str,
    items: Sequence[TypeDescriptor] | Sequence[FieldDescriptor],
    render: Callable[..., str],
    was_truncated: bool,
    empty_message: str,
    options: SearchOptions,
) -> str:
    text = f"{header}\n"
    if was_truncated:
        text += f"{options.truncation_notice}\n\n"
    if items:
        text += "\n\n".join(render(item) for item in items)
    else:
        text += empty_message
    return text


def search_schema(document: SchemaDocument, query: str, options: SearchOptions = DEFAULT_OPTIONS) -> ReportResult:
    """Build the text report of schema elements whose names contain ``query``.

    An empty (or whitespace-only) query lists every type unfiltered, while the
    query and mutation sections still run the ranking pipeline and its cap.
    """
    all_types = document.types
    term = normalize_query(query)

    if query.strip():
        logger.info("Filtering schema with query: %s (normalized: %s)", query, term)
        types = select_items(all_types, term, options.max_top_level)
    else:
        types = Truncated(items=all_types, was_truncated=False, total=len(all_types))

    queries: Truncated[FieldDescriptor] = Truncated(items=[], was_truncated=False, total=0)
    if options.includes("queries"):
        queries = _operations(document, options.query_root, term, options)

    mutations: Truncated[FieldDescriptor] = Truncated(items=[], was_truncated=False, total=0)
    if options.includes("mutations"):
        mutations = _operations(document, options.mutation_root, term, options)

    def _render_type(type_: TypeDescriptor) -> str:
        return render_type_block(type_, options.max_fields_per_type, options.type_description_limit)

    def _render_operation(operation: FieldDescriptor) -> str:
        return render_operation(operation, options.operation_description_limit)

    text = ""
    if options.includes("types"):
        text += _section(
            TYPES_HEADER, types.items, _render_type, types.was_truncated, "No matching types found.", options
        )
        text += "\n\n"
    if options.includes("queries"):
        text += _section(
            QUERIES_HEADER,
            queries.items,
            _render_operation,
            queries.was_truncated,
            "No matching queries found.",
            options,
        )
        text += "\n\n"
    if options.includes("mutations"):
        text += _section(
            MUTATIONS_HEADER,
            mutations.items,
            _render_operation,
            mutations.was_truncated,
            "No matching mutations found.",
            options,
        )

    return ReportResult(
        text=text,
        types_truncated=types.was_truncated,
        queries_truncated=queries.was_truncated,
        mutations_truncated=mutations.was_truncated,
        type_matches=types.total,
        query_matches=queries.total,
        mutation_matches=mutations.total,
    )

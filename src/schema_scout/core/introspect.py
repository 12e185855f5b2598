import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from schema_scout.core.ports.schema_source import SchemaSource
from schema_scout.core.report import DEFAULT_OPTIONS, ReportResult, SearchOptions, search_schema
from schema_scout.models import SchemaDocument

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntrospectionSuccess:
    response_text: str
    report: ReportResult
    success: Literal[True] = True


@dataclass(frozen=True)
class IntrospectionFailure:
    error: str
    success: Literal[False] = False


IntrospectionOutcome = IntrospectionSuccess | IntrospectionFailure


def load_schema_document(source: SchemaSource) -> SchemaDocument:
    """Load and validate the document; raises ``OSError``, ``EOFError`` or ``ValueError``."""
    return SchemaDocument.model_validate(source.load_document())


def introspect_schema(
    source: SchemaSource,
    query: str,
    sections: Iterable[str] | None = None,
    options: SearchOptions = DEFAULT_OPTIONS,
) -> IntrospectionOutcome:
    """Search the schema served by ``source`` and return a tagged outcome instead of raising."""
    if sections is not None:
        options = options.with_sections(sections)
    try:
        document = load_schema_document(source)
    except (OSError, EOFError, ValueError) as exc:
        logger.error("Error processing GraphQL schema: %s", exc)
        return IntrospectionFailure(error=str(exc))

    report = search_schema(document, query, options)
    return IntrospectionSuccess(response_text=report.text, report=report)

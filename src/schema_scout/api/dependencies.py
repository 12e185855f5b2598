from __future__ import annotations

from schema_scout.core.ports.schema_source import SchemaSource
from schema_scout.sources import get_schema_source as _file_source


def get_schema_source() -> SchemaSource:
    """Return the configured schema source; overridden in tests."""
    return _file_source()

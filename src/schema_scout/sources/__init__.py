from pathlib import Path

from schema_scout.settings import get_schema_path
from schema_scout.sources.file import FileSchemaSource
from schema_scout.sources.memory import InMemorySchemaSource


def get_schema_source(path: Path | str | None = None) -> FileSchemaSource:
    return FileSchemaSource(path if path is not None else get_schema_path())


__all__ = [
    "FileSchemaSource",
    "InMemorySchemaSource",
    "get_schema_source",
]

from typing import Any


class InMemorySchemaSource:
    """Serves an already-parsed introspection document."""

    def __init__(self, document: Any) -> None:
        self._document = document

    def load_document(self) -> Any:
        return self._document

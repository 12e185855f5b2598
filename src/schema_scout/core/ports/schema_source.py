from typing import Any, Protocol


class SchemaSource(Protocol):
    def load_document(self) -> Any: ...

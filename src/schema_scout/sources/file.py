import gzip
import json
import logging
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class FileSchemaSource:
    """Introspection JSON on disk, with a gzip-compressed sibling as fallback."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def compressed_path(self) -> Path:
        return self._path.with_name(f"{self._path.name}.gz")

    def ensure_decompressed(self) -> bool:
        """Write the plain JSON next to its ``.gz`` sibling if missing. Returns True if a file was written."""
        if self._path.exists() or not self.compressed_path.exists():
            return False
        logger.info("Decompressing GraphQL schema from %s", self.compressed_path)
        content = gzip.decompress(self.compressed_path.read_bytes()).decode("utf-8")
        with tempfile.NamedTemporaryFile(
            "w", encoding="utf-8", dir=self._path.parent, prefix=f".{self._path.name}.", delete=False
        ) as temp_file:
            temp_file.write(content)
        # Readers only ever see a complete file
        Path(temp_file.name).replace(self._path)
        logger.info("Saved uncompressed schema to %s", self._path)
        return True

    def read_text(self) -> str:
        self.ensure_decompressed()
        logger.info("Reading GraphQL schema from %s", self._path)
        return self._path.read_text(encoding="utf-8")

    def load_document(self) -> Any:
        return json.loads(self.read_text())

import os
from pathlib import Path

DEFAULT_DOCS_BASE_URL = "https://shopify-dev.myshopify.io"


def get_schema_path() -> Path:
    return Path(os.getenv("SCHEMA_SCOUT_SCHEMA_PATH", str(Path("data") / "admin_schema.json")))


def get_docs_base_url() -> str | None:
    """Documentation search base URL; an empty value disables the docs tool."""
    return os.getenv("SCHEMA_SCOUT_DOCS_URL", DEFAULT_DOCS_BASE_URL) or None

"""HTTP client for the documentation search endpoint."""

import json
import logging

import httpx

logger = logging.getLogger(__name__)

SEARCH_PATH = "/mcp/search"
EMPTY_RESPONSE_TEXT = "No content received from documentation search"


async def search_docs(prompt: str, base_url: str, client: httpx.AsyncClient | None = None) -> str:
    """Query the documentation search endpoint and return its body as readable text.

    JSON bodies are re-indented; anything else is returned as received.
    Raises ``httpx.HTTPError`` on transport failures and non-2xx responses.
    """
    url = f"{base_url.rstrip('/')}{SEARCH_PATH}"
    headers = {"Accept": "application/json", "Cache-Control": "no-cache"}

    owns_client = client is None
    if client is None:
        client = httpx.AsyncClient(timeout=30.0)
    try:
        logger.info("Searching documentation at %s for %r", url, prompt)
        response = await client.get(url, params={"query": prompt}, headers=headers)
        logger.info("Documentation search responded %s", response.status_code)
        response.raise_for_status()
        body = response.text
    finally:
        if owns_client:
            await client.aclose()

    try:
        return json.dumps(json.loads(body), indent=2) if body else EMPTY_RESPONSE_TEXT
    except ValueError:
        logger.warning("Documentation search response is not valid JSON")
        return body

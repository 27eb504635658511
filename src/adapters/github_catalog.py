"""Template catalog backed by the GitHub contents API.

Endpoints:
- `GET <repository>/contents`: JSON array of `{"name": ..., ...}`.
- `GET <repository>/contents/<name>`: JSON envelope with base64 `content`.
"""

from __future__ import annotations

import json
import logging
from urllib.parse import quote

import httpx
import pydantic
from pydantic import TypeAdapter

from core.domain.errors import DecodeError, TransportError
from core.domain.models import CatalogEntry

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[CatalogEntry])


def _upstream_message(body: bytes) -> str | None:
    """Extract GitHub's `message` field (rate limits, auth errors), if any."""

    try:
        data = json.loads(body)
    except ValueError:
        return None
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        return data["message"]
    return None


class GitHubTemplateCatalog:
    """Implements `core.interfaces.catalog.TemplateCatalog` over HTTP."""

    def __init__(self, client: httpx.Client, repository_url: str) -> None:
        self._client = client
        self._contents_url = f"{repository_url.rstrip('/')}/contents"

    def _get(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url)
        except httpx.HTTPError as exc:
            raise TransportError(str(exc) or exc.__class__.__name__) from exc
        logger.debug("GET %s -> HTTP %s", url, response.status_code)
        return response

    def list_entries(self) -> list[CatalogEntry]:
        response = self._get(self._contents_url)
        body = response.content

        try:
            entries = _ENTRIES.validate_json(body)
        except pydantic.ValidationError as exc:
            message = _upstream_message(body)
            if message:
                raise DecodeError(f"malformed JSON (upstream said: {message})") from exc
            raise DecodeError("malformed JSON") from exc

        logger.info("Catalog lists %d entries", len(entries))
        return entries

    def fetch_by_exact_name(self, name: str) -> bytes:
        url = f"{self._contents_url}/{quote(name)}"
        return self._get(url).content

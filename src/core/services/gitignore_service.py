"""Command orchestration.

Linear pipelines with early exit: every failure surfaces as a
`GitigniteError` and nothing is written unless the content is complete. The
CLI layer only renders results; keeping prints out of here lets tests drive
the pipelines with an in-memory catalog.
"""

from __future__ import annotations

import logging
from pathlib import Path

from core.composer import compose
from core.decoder import decode_response
from core.domain.errors import FilesystemError
from core.domain.models import GenerateRequest, ListLanguagesRequest
from core.interfaces.catalog import TemplateCatalog
from core.resolver import normalize_language, resolve, template_stems

logger = logging.getLogger(__name__)


def fetch_template(language: str, catalog: TemplateCatalog) -> bytes:
    """Resolve `language` against the catalog and return its decoded bytes.

    The catalog is listed once; the content request always uses the exact
    upstream file name, never the raw user input.
    """

    resolved = resolve(language, catalog.list_entries())
    raw_body = catalog.fetch_by_exact_name(resolved.entry_name)
    return decode_response(raw_body)


def generate_gitignore(request: GenerateRequest, catalog: TemplateCatalog) -> Path:
    """Write `<output_dir>/.gitignore` for the requested language.

    An existing file is overwritten.
    """

    language = normalize_language(request.language)
    payload = fetch_template(language, catalog)
    content = compose(payload, request.no_credits)

    output_path = request.output_path
    try:
        output_path.write_bytes(content)
    except OSError as exc:
        raise FilesystemError(str(exc)) from exc

    logger.info("Wrote %d bytes to %s", len(content), output_path)
    return output_path


def list_languages(request: ListLanguagesRequest, catalog: TemplateCatalog) -> list[str]:
    """Return every template stem, in catalog order, duplicates included."""

    return list(template_stems(catalog.list_entries()))

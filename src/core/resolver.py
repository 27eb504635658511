"""Language resolution against the upstream catalog."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from core.domain.errors import NotFoundError, ValidationError
from core.domain.models import CatalogEntry, ResolvedLanguage

logger = logging.getLogger(__name__)


def normalize_language(user_input: str | None) -> str:
    """Trim the user input and reject blanks."""

    language = (user_input or "").strip()
    if not language:
        raise ValidationError("language is required", field="language")
    return language


def template_stems(catalog: Iterable[CatalogEntry]) -> Iterator[str]:
    """Yield the stem of every template entry, in catalog order.

    Duplicates are kept as upstream sends them.
    """

    for entry in catalog:
        if entry.stem is not None:
            yield entry.stem


def resolve(user_input: str | None, catalog: Iterable[CatalogEntry]) -> ResolvedLanguage:
    """Match `user_input` case-insensitively against the catalog stems.

    Both sides are lowercased before comparing; the first match wins and is
    returned with upstream casing.
    """

    language = normalize_language(user_input)
    wanted = language.lower()

    for entry in catalog:
        stem = entry.stem
        if stem is not None and stem.lower() == wanted:
            logger.debug("Resolved %r to %s", language, entry.name)
            return ResolvedLanguage(stem=stem, entry_name=entry.name)

    raise NotFoundError("language not found")

"""Template catalog contract."""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.models import CatalogEntry


@runtime_checkable
class TemplateCatalog(Protocol):
    """Read-only view of the upstream template directory.

    Rules:
    - Each call performs exactly one upstream request (no retries, no cache).
    - `fetch_by_exact_name` does not transform `name`; it returns the raw body
      and leaves shape validation to the decoder.
    """

    def list_entries(self) -> Sequence[CatalogEntry]:
        ...

    def fetch_by_exact_name(self, name: str) -> bytes:
        ...

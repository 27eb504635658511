from __future__ import annotations

import base64
from pathlib import Path
from typing import Iterator, Sequence

import pytest
import respx

from core.config import DEFAULT_REPOSITORY_URL
from core.domain.models import CatalogEntry

CONTENTS_URL = f"{DEFAULT_REPOSITORY_URL}/contents"

PYTHON_TEMPLATE = b"# Byte-compiled / optimized / DLL files\n__pycache__/\n*.py[cod]\n"


def github_base64(payload: bytes) -> str:
    """Encode like the GitHub contents API: base64 wrapped at 60 columns."""

    encoded = base64.b64encode(payload).decode("ascii")
    return "\n".join(encoded[i : i + 60] for i in range(0, len(encoded), 60)) + "\n"


def content_envelope(payload: bytes, name: str = "Python.gitignore") -> dict[str, object]:
    return {
        "name": name,
        "path": name,
        "type": "file",
        "encoding": "base64",
        "content": github_base64(payload),
    }


def listing(*names: str) -> list[dict[str, object]]:
    return [{"name": name, "path": name, "type": "file", "sha": "0" * 40} for name in names]


class InMemoryCatalog:
    """TemplateCatalog double that records the calls it receives."""

    def __init__(self, names: Sequence[str], bodies: dict[str, bytes] | None = None) -> None:
        self._entries = [CatalogEntry(name=name) for name in names]
        self._bodies = bodies or {}
        self.list_calls = 0
        self.fetched: list[str] = []

    def list_entries(self) -> list[CatalogEntry]:
        self.list_calls += 1
        return list(self._entries)

    def fetch_by_exact_name(self, name: str) -> bytes:
        self.fetched.append(name)
        return self._bodies.get(name, b'{"message": "Not Found"}')


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory with no GITIGNITE_* overrides."""

    for var in (
        "GITIGNITE_REPOSITORY_URL",
        "GITIGNITE_HTTP_TIMEOUT_SECONDS",
        "GITIGNITE_USER_AGENT",
        "GITIGNITE_GITHUB_TOKEN",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def upstream() -> Iterator[respx.MockRouter]:
    with respx.mock(assert_all_called=False) as router:
        yield router

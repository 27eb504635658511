from __future__ import annotations

from pathlib import Path

import pytest

from core.config import DEFAULT_REPOSITORY_URL, AppSettings


def test_defaults_match_public_repository() -> None:
    settings = AppSettings()
    assert settings.repository_url == DEFAULT_REPOSITORY_URL
    assert settings.http_timeout_seconds == pytest.approx(20.0)
    assert settings.github_token is None


def test_dotenv_in_working_directory_is_ignored(isolated_env: Path) -> None:
    (isolated_env / ".env").write_text(
        "GITIGNITE_REPOSITORY_URL=https://elsewhere.example/repos/x\nGITIGNITE_GITHUB_TOKEN=leaked\n"
    )

    settings = AppSettings()

    assert settings.repository_url == DEFAULT_REPOSITORY_URL
    assert settings.github_token is None


def test_exported_variables_are_honored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITIGNITE_HTTP_TIMEOUT_SECONDS", "5")
    monkeypatch.setenv("GITIGNITE_GITHUB_TOKEN", "t0ken")

    settings = AppSettings()

    assert settings.http_timeout_seconds == pytest.approx(5.0)
    assert settings.github_token == "t0ken"

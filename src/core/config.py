"""Core configuration.

Typed defaults (pydantic-settings) shared by the CLI and the adapters. They
match the public GitHub template repository, so nothing has to be configured
for normal use. Only variables exported in the process environment are read;
no file is loaded, since `init` runs inside the user's own project directory.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from core import __version__

DEFAULT_REPOSITORY_URL = "https://api.github.com/repos/github/gitignore"


class AppSettings(BaseSettings):
    """Central application settings.

    Variables use the `GITIGNITE_` prefix, e.g. `GITIGNITE_GITHUB_TOKEN`.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITIGNITE_",
        extra="ignore",
        case_sensitive=False,
    )

    repository_url: str = Field(
        default=DEFAULT_REPOSITORY_URL,
        min_length=8,
        description="GitHub API base of the template repository (without /contents).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds).",
    )
    user_agent: str = Field(
        default=f"gitignite/{__version__}",
        min_length=1,
        description="User-Agent sent to the GitHub API.",
    )
    github_token: str | None = Field(
        default=None,
        description="Optional token to lift anonymous API rate limits.",
    )

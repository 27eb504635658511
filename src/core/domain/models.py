"""Domain models (pydantic v2).

Every model is frozen: values are produced once per invocation and flow
forward through the pipeline without being mutated.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

TEMPLATE_SUFFIX = ".gitignore"


class CatalogEntry(BaseModel):
    """One file of the upstream template directory.

    Only `name` matters here; GitHub also sends `path`, `sha`, `type`, links
    and so on, which are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(
        ...,
        description="File name as listed upstream (e.g. 'Python.gitignore', 'README.md').",
    )

    @property
    def is_template(self) -> bool:
        return self.name.endswith(TEMPLATE_SUFFIX)

    @property
    def stem(self) -> str | None:
        """Language identifier, or None when the entry is not a template."""

        if not self.is_template:
            return None
        return self.name[: -len(TEMPLATE_SUFFIX)]


class ResolvedLanguage(BaseModel):
    """A catalog template matched from user input.

    `stem` keeps upstream casing because the content endpoint is
    case-sensitive.
    """

    model_config = ConfigDict(frozen=True)

    stem: str = Field(..., min_length=1)
    entry_name: str = Field(..., min_length=1)


class ContentEnvelope(BaseModel):
    """JSON wrapper returned by the per-file content endpoint."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    content: str = Field(
        default="",
        description="Base64 file bytes; empty when upstream has no such file.",
    )


class GenerateRequest(BaseModel):
    """Parsed intent of `gitignite init`."""

    model_config = ConfigDict(frozen=True)

    language: str = ""
    no_credits: bool = False
    output_dir: Path = Path(".")

    @property
    def output_path(self) -> Path:
        return self.output_dir / ".gitignore"


class ListLanguagesRequest(BaseModel):
    """Parsed intent of `gitignite langs`."""

    model_config = ConfigDict(frozen=True)


CommandRequest = GenerateRequest | ListLanguagesRequest

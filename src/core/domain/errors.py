"""Error hierarchy shared by every layer.

Adapters translate library exceptions (httpx, pydantic, OSError) into these
types so the CLI only has to handle `GitigniteError`.
"""

from __future__ import annotations


class GitigniteError(Exception):
    """Base class for every user-facing failure of a command."""


class ValidationError(GitigniteError):
    """A required input is missing or blank."""

    def __init__(self, message: str, *, field: str) -> None:
        super().__init__(message)
        self.field = field


class TransportError(GitigniteError):
    """Upstream could not be reached."""


class DecodeError(GitigniteError):
    """Upstream answered with an empty or malformed payload."""


class NotFoundError(GitigniteError):
    """The catalog is well-formed but has no matching template."""


class FilesystemError(GitigniteError):
    """The output file could not be written."""

"""gitignite command line.

Commands build an immutable request object from the parsed arguments first,
then hand it to the service layer. Errors are rendered once, here, and turn
into exit status 1; the success line is printed only after the write.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler

from adapters.github_catalog import GitHubTemplateCatalog
from adapters.http_client import build_client
from cli import doctor
from cli.ui_components import print_error, print_languages
from core import __version__
from core.config import AppSettings
from core.domain.errors import FilesystemError, GitigniteError, ValidationError
from core.domain.models import GenerateRequest, ListLanguagesRequest
from core.services.gitignore_service import generate_gitignore, list_languages

app = typer.Typer(
    no_args_is_help=True,
    help="Generate .gitignore files from GitHub's template collection.",
)
app.add_typer(doctor.app, name="doctor")

_console = Console(soft_wrap=True)
_err_console = Console(stderr=True, soft_wrap=True)

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Route log records to stderr; stdout only carries command output."""

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=debug)],
        force=True,
    )


def _fail(message: str) -> NoReturn:
    print_error(_err_console, message)
    raise typer.Exit(code=1)


@contextmanager
def _open_catalog(settings: AppSettings) -> Iterator[GitHubTemplateCatalog]:
    with build_client(settings) as client:
        yield GitHubTemplateCatalog(client, settings.repository_url)


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"gitignite {__version__}", markup=False, highlight=False)
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging on stderr."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Generate .gitignore files from GitHub's template collection."""

    configure_logging(debug)


@app.command("init")
def init(
    language: str = typer.Argument("", help="Template language, matched case-insensitively.", show_default=False),
    no_credits: bool = typer.Option(
        False,
        "--no-credits",
        "-nc",
        help="Do not add credits to the generated .gitignore file.",
    ),
    output: Path = typer.Option(Path("."), "--output", "-o", help="Output directory."),
) -> None:
    """Generate a .gitignore file from a language template."""

    request = GenerateRequest(language=language, no_credits=no_credits, output_dir=output)
    settings = AppSettings()

    try:
        with _open_catalog(settings) as catalog:
            generate_gitignore(request, catalog)
    except ValidationError as exc:
        _fail(str(exc))
    except FilesystemError as exc:
        _fail(f"error creating .gitignore file: {exc}")
    except GitigniteError as exc:
        _fail(f"error fetching gitignore content: {exc}")

    _console.print(".gitignore file created successfully!", markup=False, highlight=False)


@app.command("langs")
def langs() -> None:
    """List available languages."""

    request = ListLanguagesRequest()
    settings = AppSettings()

    try:
        with _open_catalog(settings) as catalog:
            stems = list_languages(request, catalog)
    except GitigniteError as exc:
        _fail(f"error fetching languages: {exc}")

    print_languages(_console, stems)


app.command("i", hidden=True)(init)
app.command("l", hidden=True)(langs)


def run() -> None:
    app()

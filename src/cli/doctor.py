"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console

from adapters.github_catalog import GitHubTemplateCatalog
from adapters.http_client import build_client
from cli.ui_components import build_doctor_table
from core.config import AppSettings
from core.domain.errors import GitigniteError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console(soft_wrap=True)


def _check_catalog(settings: AppSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            entries = GitHubTemplateCatalog(client, settings.repository_url).list_entries()
    except GitigniteError as exc:
        return False, str(exc)
    templates = sum(1 for entry in entries if entry.is_template)
    return True, f"{templates} templates available"


@app.command()
def run() -> None:
    """Show the effective settings and check that upstream answers."""

    settings = AppSettings()

    table = build_doctor_table()
    table.add_row("Repository", "OK", settings.repository_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    if settings.github_token:
        table.add_row("GitHub token", "OK", "Authenticated requests")
    else:
        table.add_row("GitHub token", "OPTIONAL", "Anonymous requests (low rate limit)")

    ok, detail = _check_catalog(settings)
    table.add_row("Template catalog", "OK" if ok else "FAIL", detail)

    _console.print(table)

    if not ok:
        raise typer.Exit(code=1)

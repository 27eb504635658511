"""CLI output components (Rich).

Keeps presentation details out of the command functions. Upstream names are
printed with markup and highlighting disabled so they reach stdout verbatim.
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table


def print_languages(console: Console, stems: Iterable[str]) -> None:
    console.print("Available languages:", markup=False, highlight=False)
    for stem in stems:
        console.print(stem, markup=False, highlight=False, emoji=False)


def print_error(console: Console, message: str) -> None:
    """Print a single human-readable error line."""

    console.print(f"[bold red]Error:[/bold red] {escape(message)}", highlight=False)


def build_doctor_table() -> Table:
    table = Table(title="gitignite doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white", no_wrap=True)
    table.add_column("Details", style="dim")
    return table

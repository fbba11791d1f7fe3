"""Status-line output on the Rich console.

One helper per severity so every topic reports in the same visual language
(`[✓]` success, `[!]` warning, `[✖]` error, dim info).
"""

from __future__ import annotations

from typing import Iterable

from rich.console import Console
from rich.markup import escape
from rich.table import Table


def print_header(console: Console, text: str) -> None:
    console.print(f"\n[bold magenta]--- {escape(text)} ---[/bold magenta]")


def print_section(console: Console, text: str) -> None:
    console.print(f"\n[blue]--- {escape(text)} ---[/blue]")


def print_success(console: Console, text: str) -> None:
    console.print(f"[green]\\[✓] {escape(text)}[/green]")


def print_warning(console: Console, text: str) -> None:
    console.print(f"[yellow]\\[!] {escape(text)}[/yellow]")


def print_error(console: Console, text: str) -> None:
    console.print(f"[red]\\[✖] {escape(text)}[/red]")


def print_info(console: Console, text: str) -> None:
    console.print(f"[dim]{escape(text)}[/dim]")


def print_key_values(console: Console, title: str, rows: Iterable[tuple[str, object]]) -> None:
    """Two-column table (configuration dumps, summaries)."""

    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    for key, value in rows:
        table.add_row(key, escape(str(value)))
    console.print(table)

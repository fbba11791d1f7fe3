"""UI components for the CLI (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- Lets several commands share the same panels and tables.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def print_banner(console: Console) -> None:
    """Print the welcome banner.

    Why here:
    - Avoids circular imports (main <-> doctor).
    - Commands that should stay quiet simply don't call it.
    """

    title = Text("Secure Infrastructure Tool", style="bold magenta")
    subtitle = Text("mTLS identity • Apple profile • Secure portal • SSH", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="magenta", padding=(1, 4)))


def build_checks_table(title: str) -> Table:
    """Table used by `doctor run` (check / status / details)."""

    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table


def status_label(ok: bool, *, optional: bool = False) -> str:
    if ok:
        return "[green]OK[/green]"
    return "[yellow]OPTIONAL[/yellow]" if optional else "[red]MISSING[/red]"

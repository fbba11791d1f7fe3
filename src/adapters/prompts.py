"""Typer-backed `Prompter`."""

from __future__ import annotations

import typer


class TyperPrompter:
    """Reads answers with `typer.prompt` (Click handles Ctrl-C as an abort)."""

    def ask(self, label: str, default: str | None = None) -> str:
        answer = typer.prompt(
            typer.style(label, fg=typer.colors.CYAN),
            default=default or "",
            show_default=bool(default),
        )
        return str(answer).strip()

    def pause(self, message: str) -> None:
        typer.prompt(
            typer.style(message, fg=typer.colors.MAGENTA),
            default="",
            show_default=False,
            prompt_suffix=" ",
        )

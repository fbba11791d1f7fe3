"""Operator prompt contract.

Why Protocol:
- The wizard only needs "ask with a default" and "wait for Enter"; the Typer
  implementation and the scripted test double are interchangeable.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Prompter(Protocol):
    """Minimal interactive surface used by services."""

    def ask(self, label: str, default: str | None = None) -> str:
        """Return the stripped answer, or `default` (or "") when left blank."""

        ...

    def pause(self, message: str) -> None:
        """Block until the operator acknowledges `message`."""

        ...

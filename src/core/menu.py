"""Numbered menu of topics.

A menu is an ordered list of options, each bound to an action. Selection is a
single numeric answer; anything unusable selects the default option.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from rich.console import Console

from adapters.terminal import print_section, print_warning
from core.interfaces.prompter import Prompter


@dataclass(frozen=True)
class MenuOption:
    label: str
    value: str
    action: Callable[[], Any]


@dataclass
class Menu:
    title: str
    prompter: Prompter
    console: Console
    default_index: int = 0
    options: list[MenuOption] = field(default_factory=list)

    def add_option(self, label: str, value: str, action: Callable[[], Any]) -> None:
        self.options.append(MenuOption(label=label, value=value, action=action))

    def select(self) -> MenuOption:
        if not self.options:
            raise ValueError(f"menu '{self.title}' has no options")

        print_section(self.console, self.title)
        for i, option in enumerate(self.options, start=1):
            self.console.print(f"{i}. {option.label}", highlight=False)

        default = self.options[self.default_index]
        choice = self.prompter.ask(
            f"Select option [1-{len(self.options)}]",
            str(self.default_index + 1),
        )
        value = choice.strip()
        if value.isdigit() and 1 <= int(value) <= len(self.options):
            return self.options[int(value) - 1]

        print_warning(self.console, f"Invalid selection '{value}', using default: {default.label}")
        return default

    def show(self) -> Any:
        """Select an option and run its action, returning what the action returns."""

        return self.select().action()

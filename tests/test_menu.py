from __future__ import annotations

from rich.console import Console

from conftest import ScriptedPrompter, output_of
from core.menu import Menu


def _menu(prompter: ScriptedPrompter, console: Console) -> Menu:
    menu = Menu("Select Operation", prompter, console)
    menu.add_option("First", "first", lambda: "first")
    menu.add_option("Second", "second", lambda: "second")
    return menu


def test_show_runs_selected_action(console: Console) -> None:
    assert _menu(ScriptedPrompter(["2"]), console).show() == "second"
    assert "1. First" in output_of(console)
    assert "2. Second" in output_of(console)


def test_empty_answer_uses_default(console: Console) -> None:
    prompter = ScriptedPrompter([None])
    assert _menu(prompter, console).show() == "first"
    assert prompter.asked == ["Select option [1-2]"]


def test_invalid_answer_uses_default_with_warning(console: Console) -> None:
    assert _menu(ScriptedPrompter(["7"]), console).select().value == "first"
    assert "Invalid selection '7'" in output_of(console)

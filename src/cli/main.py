"""secure-infra command line.

Running the bare command starts the interactive wizard; `doctor` groups the
environment checks and the defaults editor.
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from adapters.prompts import TyperPrompter
from adapters.shell import SubprocessRunner
from adapters.terminal import print_error, print_success
from cli.doctor import app as doctor_app
from cli.ui_components import print_banner
from core.config import AppSettings
from core.domain.modes import OperationMode
from core.errors import ProvisioningError
from core.services.context import WizardContext
from core.services.wizard import SetupWizard

app = typer.Typer(
    help="Provision mTLS identities, Apple profiles, the file portal and SSH keys.",
    add_completion=False,
)
app.add_typer(doctor_app, name="doctor")

_console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)],
    )


def _parse_mode(value: str | None) -> OperationMode | None:
    if value is None:
        return None
    mode = OperationMode.parse(value)
    if mode is None:
        raise typer.BadParameter(f"unknown mode '{value}'", param_hint="--mode")
    return mode


def _load_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as exc:
        fields = ", ".join(".".join(str(part) for part in error["loc"]) for error in exc.errors())
        print_error(_console, f"Invalid SECURE_INFRA_* configuration: {fields}")
        raise typer.Exit(code=1) from exc


def _run_wizard(settings: AppSettings, *, mode: OperationMode | None, work_dir: Path | None) -> None:
    ctx = WizardContext(
        settings=settings,
        prompter=TyperPrompter(),
        runner=SubprocessRunner(timeout=settings.tool_timeout_seconds),
        console=_console,
    )

    print_banner(_console)
    try:
        result = SetupWizard(ctx, work_dir=work_dir).run(mode)
    except ProvisioningError as exc:
        print_error(_console, str(exc))
        raise typer.Exit(code=1) from exc

    if result is not None:
        print_success(_console, "Task Finished.")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every external command."),
) -> None:
    """Interactive orchestrator for a self-hosted secure access setup."""

    settings = _load_settings()
    ctx.obj = settings
    _configure_logging("DEBUG" if verbose else settings.log_level)
    if ctx.invoked_subcommand is None:
        _run_wizard(settings, mode=None, work_dir=None)


@app.command()
def wizard(
    ctx: typer.Context,
    mode: str | None = typer.Option(
        None,
        "--mode",
        "-m",
        help="Skip the menu: 1-5 or a mode name (e.g. mtls_only, github_ssh).",
    ),
    work_dir: Path | None = typer.Option(
        None,
        "--work-dir",
        "-w",
        help="Default offered for the working directory prompt.",
    ),
) -> None:
    """Run the interactive setup wizard."""

    _run_wizard(ctx.obj or _load_settings(), mode=_parse_mode(mode), work_dir=work_dir)


def run() -> None:
    app()


if __name__ == "__main__":
    run()

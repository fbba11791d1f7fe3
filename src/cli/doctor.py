"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio
import shutil
import sys

import httpx
import typer
from rich.console import Console

from adapters.clipboard import clipboard_command
from adapters.http_client import build_async_client
from adapters.shell import SubprocessRunner
from cli.ui_components import build_checks_table, status_label
from core.config import AppSettings, write_user_env_vars
from core.errors import ExternalToolError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()

REQUIRED_TOOLS = ("openssl", "ssh-keygen", "ssh-add")
OPTIONAL_TOOLS = ("ssh-copy-id",)


async def _check_http(url: str, settings: AppSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(url)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc) or exc.__class__.__name__


def _tool_version(runner: SubprocessRunner, binary: str) -> str:
    try:
        result = runner.run([binary, "version"])
    except ExternalToolError as exc:
        return str(exc)
    return (result.stdout or "").strip()


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = AppSettings()
    runner = SubprocessRunner(timeout=10)

    table = build_checks_table("secure-infra Doctor")

    missing_required: list[str] = []
    for tool in REQUIRED_TOOLS:
        path = shutil.which(tool)
        if path is None:
            missing_required.append(tool)
        detail = path or "not on PATH"
        if path and tool == "openssl":
            detail = _tool_version(runner, tool)
        table.add_row(tool, status_label(path is not None), detail)

    for tool in OPTIONAL_TOOLS:
        path = shutil.which(tool)
        table.add_row(tool, status_label(path is not None, optional=True), path or "remote key sync unavailable")

    clip = clipboard_command(runner)
    table.add_row(
        "Clipboard",
        status_label(clip is not None, optional=True),
        " ".join(clip) if clip else f"no clipboard tool for {sys.platform}; manual copy",
    )

    # Config
    table.add_row("Working directory", "OK", str(settings.default_work_dir))
    table.add_row("Subdomains", "OK", f"{settings.default_ha_subdomain} / {settings.default_portal_subdomain}")
    table.add_row("SSH key", "OK", str(settings.ssh_dir / settings.ssh_key_name))

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings.github_base_url, settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if missing_required:
        _console.print(
            f"\n[yellow]Note:[/yellow] install {', '.join(missing_required)} before running the wizard."
        )
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive defaults (stored in the user config .env).

    Only defaults change; every run still asks before using them.
    """

    settings = AppSettings()

    work_dir = typer.prompt("Default working directory", default=str(settings.default_work_dir)).strip()
    ha = typer.prompt("Tunnel (HA) subdomain", default=settings.default_ha_subdomain).strip()
    portal = typer.prompt("Portal subdomain", default=settings.default_portal_subdomain).strip()
    ssh_dir = typer.prompt("SSH directory", default=str(settings.ssh_dir)).strip()
    key_name = typer.prompt("SSH key name", default=settings.ssh_key_name).strip()
    email = typer.prompt("SSH identifier email", default=settings.ssh_email, show_default=bool(settings.ssh_email)).strip()

    if not work_dir or not ha or not portal or not key_name:
        raise typer.BadParameter("working directory, subdomains and key name are required")

    env_path = write_user_env_vars(
        {
            "SECURE_INFRA_DEFAULT_WORK_DIR": work_dir,
            "SECURE_INFRA_DEFAULT_HA_SUBDOMAIN": ha,
            "SECURE_INFRA_DEFAULT_PORTAL_SUBDOMAIN": portal,
            "SECURE_INFRA_SSH_DIR": ssh_dir,
            "SECURE_INFRA_SSH_KEY_NAME": key_name,
            "SECURE_INFRA_SSH_EMAIL": email,
        }
    )

    _console.print(f"[green]Saved defaults to:[/green] {env_path}")

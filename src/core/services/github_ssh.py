"""GitHub SSH onboarding topic.

Independent of the domain configuration: it only needs where the key lives and
what to call it. Everything after key generation is best-effort; a missing
agent, clipboard or unreachable remote host is reported and the run goes on.
"""

from __future__ import annotations

import asyncio
import getpass
import logging
import socket
from pathlib import Path

import httpx
from pydantic import ValidationError

from adapters.clipboard import copy_to_clipboard
from adapters.github_keys import is_key_published
from adapters.terminal import print_error, print_info, print_section, print_success, print_warning
from core.domain.models import SessionConfig, SshOnboarding
from core.errors import ExternalToolError, InvalidInputError
from core.services.context import SummaryRow, Topic, WizardContext

logger = logging.getLogger(__name__)


def _default_comment() -> str:
    try:
        return f"{getpass.getuser()}@{socket.gethostname()}"
    except (KeyError, OSError):
        return "secure-infra"


def _yes(answer: str) -> bool:
    return answer.strip().lower() in ("y", "yes")


def gather_onboarding(ctx: WizardContext) -> SshOnboarding:
    default_dir = ctx.settings.ssh_dir
    print_info(ctx.console, f"Default SSH directory: {default_dir}")
    ssh_dir = ctx.prompter.ask("Use default or enter new path", str(default_dir))
    key_name = ctx.prompter.ask("Key name", ctx.settings.ssh_key_name)
    email = ctx.prompter.ask("Identifier email", ctx.settings.ssh_email or _default_comment())
    try:
        return SshOnboarding(ssh_dir=Path(ssh_dir), key_name=key_name, email=email)
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid SSH settings: {exc.errors()[0]['msg']}") from exc


def _verify_published(ctx: WizardContext, public_key: str) -> None:
    username = ctx.prompter.ask("GitHub username to verify the key (leave blank to skip)")
    if not username:
        return
    try:
        found = asyncio.run(
            is_key_published(
                username,
                public_key,
                settings=ctx.settings,
                transport=ctx.http_transport,
            )
        )
    except httpx.HTTPError as exc:
        logger.warning("published key lookup failed: %s", exc)
        print_warning(ctx.console, f"Could not verify the key on GitHub: {exc}")
        return
    if found:
        print_success(ctx.console, f"Key is published for {username}.")
    else:
        print_warning(ctx.console, f"Key not listed for {username} yet (GitHub may take a moment).")


def _register_with_provider(ctx: WizardContext, onboarding: SshOnboarding) -> None:
    public_key = onboarding.public_key_path.read_text(encoding="utf-8").strip()

    copied = False
    if _yes(ctx.prompter.ask("Copy the public key to the clipboard? [y/n]", "y")):
        copied = copy_to_clipboard(public_key, ctx.runner, platform=ctx.platform)
        if copied:
            print_info(ctx.console, "[Clipboard] Content copied automatically.")
        else:
            print_warning(ctx.console, "Clipboard unavailable. Manual copy required.")
    if not copied:
        ctx.console.print(public_key, highlight=False, soft_wrap=True)

    keys_url = f"{ctx.settings.github_base_url.rstrip('/')}/settings/keys"
    print_info(ctx.console, f"\n1. Go to: {keys_url}")
    print_info(ctx.console, "2. Click 'New SSH Key' and paste the public key.")
    ctx.prompter.pause("Press Enter once added to GitHub")

    _verify_published(ctx, public_key)


def _add_to_agent(ctx: WizardContext, onboarding: SshOnboarding) -> None:
    print_info(ctx.console, "Adding key to SSH agent...")
    try:
        ctx.ssh.add_to_agent(onboarding.private_key_path)
    except ExternalToolError as exc:
        logger.warning("ssh-add failed: %s", exc)
        print_warning(ctx.console, f"Could not add the key to the SSH agent: {exc}")
        return
    print_success(ctx.console, "Key added to SSH agent.")


def _sync_remote(ctx: WizardContext, onboarding: SshOnboarding) -> None:
    print_section(ctx.console, "[Optional] Copy Identity to Remote Machine")
    print_info(ctx.console, "Aim: password-less login to a remote server (e.g. RPI, cloud instance).")
    remote = ctx.prompter.ask("Enter MACHINE_USER_NAME@MACHINE_IP (or leave blank to skip)")
    if not remote:
        print_info(ctx.console, "Skipping remote machine sync.")
        return
    try:
        ctx.ssh.copy_id(onboarding.private_key_path, remote)
    except ExternalToolError as exc:
        logger.warning("ssh-copy-id to %s failed: %s", remote, exc)
        print_error(ctx.console, "Failed to copy key to remote machine. Check IP/Username.")
        return
    print_success(ctx.console, f"Identity copied to {remote}.")


def onboard_github_ssh(ctx: WizardContext, session: SessionConfig) -> list[SummaryRow]:
    print_section(ctx.console, "GitHub SSH Onboarding")
    onboarding = gather_onboarding(ctx)
    private_key = onboarding.private_key_path

    if ctx.writer.should_generate(private_key):
        ctx.ssh.generate_key(
            private_key,
            comment=onboarding.email,
            key_type=ctx.settings.ssh_key_type,
            bits=ctx.settings.ssh_key_bits,
        )
        print_success(ctx.console, f"Generated key pair: {private_key}")

    if onboarding.public_key_path.is_file():
        _register_with_provider(ctx, onboarding)
    else:
        print_warning(ctx.console, f"Public key not found: {onboarding.public_key_path}")

    _add_to_agent(ctx, onboarding)
    _sync_remote(ctx, onboarding)
    return [("SSH Key", private_key)]


GITHUB_SSH_TOPIC = Topic(id="github-ssh", name="GitHub SSH Onboarding", run=onboard_github_ssh)

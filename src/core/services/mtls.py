"""mTLS identity and Apple profile topics.

Flow:
1. `client.key` + `client.csr` for `<ha_subdomain>.<domain>`.
2. The operator pastes the CSR into the tunnel provider and saves the issued
   certificate as `client.pem`.
3. `device-cert.p12` bundles key + certificate; the `.mobileconfig` embeds it.
"""

from __future__ import annotations

import logging
from typing import Sequence

from adapters.artifact_writer import has_content
from adapters.clipboard import copy_to_clipboard
from adapters.documents import render_apple_profile
from adapters.terminal import print_info, print_section, print_success, print_warning
from core.domain.models import CLIENT_KEY, CLIENT_PEM, DEVICE_P12, SessionConfig
from core.errors import MissingPrerequisiteError
from core.services.context import SummaryRow, Topic, WizardContext

logger = logging.getLogger(__name__)

PROVIDER_CERT_HINT = "Zero Trust > Settings > Certificates (client certificates)"


def verify_prerequisites(session: SessionConfig, files: Sequence[str]) -> None:
    """Raise unless every name in `files` exists (non-empty) in `tunnel_cert/`."""

    missing = [name for name in files if not has_content(session.cert_dir / name)]
    if missing:
        raise MissingPrerequisiteError(
            session.cert_dir,
            missing,
            hint="Run the 'mTLS Identity Only' step first or place your existing keys in that folder.",
        )


def generate_identity(ctx: WizardContext, session: SessionConfig) -> list[SummaryRow]:
    print_section(ctx.console, "mTLS Identity")
    session.cert_dir.mkdir(parents=True, exist_ok=True)

    key_regenerated = False
    if ctx.writer.should_generate(session.key_path):
        bits = ctx.settings.rsa_key_bits
        print_info(ctx.console, f"Generating RSA {bits} bit key for {session.common_name}...")
        ctx.openssl.generate_key(session.key_path, bits=bits)
        key_regenerated = True

    if key_regenerated and has_content(session.csr_path):
        print_warning(ctx.console, "The existing CSR was issued for the previous key.")
    if ctx.writer.should_generate(session.csr_path):
        ctx.openssl.generate_csr(session.key_path, session.csr_path, session.common_name)
        print_success(ctx.console, f"CSR generated for CN={session.common_name}")

    csr = session.csr_path.read_text(encoding="utf-8")
    ctx.console.print("\n[bold green]\\[ACTION REQUIRED][/bold green]")
    print_info(ctx.console, f"1. Upload this CSR to your tunnel provider ({PROVIDER_CERT_HINT}):")
    ctx.console.print(f"   [cyan]{session.csr_path}[/cyan]", highlight=False)
    if copy_to_clipboard(csr, ctx.runner, platform=ctx.platform):
        print_success(ctx.console, "CSR copied to clipboard.")
    else:
        print_warning(ctx.console, "Manual copy required (clipboard unavailable).")
    print_info(ctx.console, "2. Paste the issued certificate into:")
    ctx.console.print(f"   [bold yellow]{session.pem_path}[/bold yellow]", highlight=False)

    ctx.prompter.pause("Press Enter once client.pem is saved to continue...")

    if not has_content(session.pem_path):
        raise MissingPrerequisiteError(
            session.cert_dir,
            [CLIENT_PEM],
            hint="Save the certificate issued for client.csr there and run again.",
        )
    print_success(ctx.console, f"Found {session.pem_path}")
    return [("Key/CSR", session.cert_dir)]


def build_apple_profile(ctx: WizardContext, session: SessionConfig) -> list[SummaryRow]:
    print_section(ctx.console, "Apple Profile Construction")
    verify_prerequisites(session, [CLIENT_KEY, CLIENT_PEM])

    if ctx.writer.should_generate(session.p12_path):
        print_info(ctx.console, "Bundling client.key and client.pem into a PKCS#12 archive...")
        ctx.openssl.generate_p12(
            session.p12_path,
            session.key_path,
            session.pem_path,
            password=ctx.settings.p12_password,
        )
    verify_prerequisites(session, [DEVICE_P12])

    profile = render_apple_profile(session=session, p12_bytes=session.p12_path.read_bytes())
    outcome = ctx.writer.write(session.profile_path, profile)
    logger.debug("profile %s: %s", session.profile_path, outcome.value)
    return [("Apple Profile", session.profile_path)]


MTLS_TOPIC = Topic(id="mtls", name="mTLS Identity", run=generate_identity)
APPLE_PROFILE_TOPIC = Topic(id="apple-profile", name="Apple Profile", run=build_apple_profile)

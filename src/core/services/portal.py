"""Secure portal (FileBrowser) topic."""

from __future__ import annotations

from adapters.artifact_writer import has_content
from adapters.documents import render_compose, render_portal_settings
from adapters.terminal import print_info, print_section, print_success, print_warning
from core.domain.models import SessionConfig
from core.services.context import SummaryRow, Topic, WizardContext


def _portal_tls(ctx: WizardContext, session: SessionConfig) -> None:
    cert, key = session.portal_cert_path, session.portal_key_path
    # openssl writes both files at once, so one answer covers the pair.
    existing = [path for path in (cert, key) if has_content(path)]
    incomplete = len(existing) == 1
    if incomplete:
        print_warning(ctx.console, f"Portal TLS pair is incomplete: only {existing[0].name} has content.")
    if existing and not ctx.writer.confirm_override(existing[0]):
        if incomplete:
            print_warning(
                ctx.console,
                f"Kept the incomplete pair; FileBrowser needs both {cert.name} and {key.name} to serve HTTPS.",
            )
    else:
        print_info(
            ctx.console,
            f"Generating self-signed certificate for {session.portal_common_name}...",
        )
        ctx.openssl.generate_self_signed(
            cert,
            key,
            session.portal_common_name,
            days=ctx.settings.portal_cert_days,
        )


def _publish_downloads(ctx: WizardContext, session: SessionConfig) -> None:
    """Offer the device bundle and profile through the portal's /srv."""

    sources = [session.p12_path, session.profile_path]
    if not all(has_content(path) for path in sources):
        print_warning(
            ctx.console,
            "Skipping copy of mTLS files (not found in tunnel_cert). The portal download area stays empty.",
        )
        return
    for src in sources:
        ctx.writer.write(session.portal_srv_dir / src.name, src.read_bytes())
    print_info(ctx.console, "Copied mTLS files to the portal download area.")


def generate_portal(ctx: WizardContext, session: SessionConfig) -> list[SummaryRow]:
    print_section(ctx.console, "Secure Portal (FileBrowser)")
    for directory in (session.portal_conf_dir, session.portal_srv_dir, session.portal_cert_dir):
        directory.mkdir(parents=True, exist_ok=True)

    _portal_tls(ctx, session)

    compose = render_compose(srv_dir=session.portal_srv_dir, cert_dir=session.portal_cert_dir)
    ctx.writer.write(session.compose_path, compose)
    ctx.writer.write(session.settings_path, render_portal_settings())

    _publish_downloads(ctx, session)

    print_success(ctx.console, f"Portal configuration written to {session.portal_conf_dir}")
    return [("Portal Config", session.portal_conf_dir)]


PORTAL_TOPIC = Topic(id="portal", name="Portal Configuration", run=generate_portal)

"""Rendering of the configuration documents.

Why it lives in adapters:
- Jinja2 and the exact on-disk formats (plist XML, compose YAML, JSON) are
  infrastructure details.
- Services hand over domain values and get text back; nothing is written here.
"""

from __future__ import annotations

import base64
import json
import uuid
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from core.domain.models import PORTAL_CERT, PORTAL_KEY, SessionConfig


_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

FILEBROWSER_IMAGE = "filebrowser/filebrowser:latest"
PORTAL_BRANDING = "Secure Setup Portal"


def _get_env() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(_TEMPLATES_DIR)),
        autoescape=select_autoescape(["xml"]),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def new_payload_uuid() -> str:
    return str(uuid.uuid4()).upper()


def render_apple_profile(
    *,
    session: SessionConfig,
    p12_bytes: bytes,
    payload_uuid: str | None = None,
    profile_uuid: str | None = None,
) -> str:
    """Render the `.mobileconfig` plist embedding `p12_bytes` as a PKCS#12 payload.

    The two UUIDs are generated independently unless given (tests pin them).
    """

    template = _get_env().get_template("mobileconfig.xml")
    return template.render(
        certificate_file_name=f"{session.ha_subdomain}.p12",
        p12_base64=base64.b64encode(p12_bytes).decode("ascii"),
        common_name=session.common_name,
        display_name=f"Home mTLS ({session.common_name})",
        identifier=session.profile_identifier,
        payload_uuid=payload_uuid or new_payload_uuid(),
        profile_uuid=profile_uuid or new_payload_uuid(),
    )


def render_compose(
    *,
    srv_dir: Path,
    cert_dir: Path,
    host_port: int = 8443,
    puid: int = 1000,
    pgid: int = 1000,
) -> str:
    template = _get_env().get_template("docker-compose.yml")
    return template.render(
        image=FILEBROWSER_IMAGE,
        container_name="filebrowser-portal",
        host_port=host_port,
        srv_dir=srv_dir.resolve(),
        cert_dir=cert_dir.resolve(),
        puid=puid,
        pgid=pgid,
    )


def portal_settings(*, cert_file: str = PORTAL_CERT, key_file: str = PORTAL_KEY) -> dict[str, Any]:
    return {
        "port": 443,
        "address": "0.0.0.0",
        "cert": f"/certs/{cert_file}",
        "key": f"/certs/{key_file}",
        "log": "stdout",
        "database": "/database/filebrowser.db",
        "root": "/srv",
        "auth": {"method": "json"},
        "branding": {"name": PORTAL_BRANDING, "disableExternal": True},
    }


def render_portal_settings(**kwargs: str) -> str:
    return json.dumps(portal_settings(**kwargs), indent=2) + "\n"

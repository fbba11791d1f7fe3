from __future__ import annotations

import base64
import json
import plistlib
from pathlib import Path

from adapters.documents import render_apple_profile, render_compose, render_portal_settings
from core.domain.models import SessionConfig


def _session(tmp_path: Path) -> SessionConfig:
    return SessionConfig(work_dir=tmp_path, domain="a.b.com", ha_subdomain="ha")


def test_apple_profile_is_a_valid_plist(tmp_path: Path) -> None:
    p12 = b"\x30\x82binary<&>"
    xml = render_apple_profile(session=_session(tmp_path), p12_bytes=p12)

    profile = plistlib.loads(xml.encode("utf-8"))

    assert profile["PayloadType"] == "Configuration"
    assert profile["PayloadIdentifier"] == "com.b.a.mtls"
    assert profile["PayloadDisplayName"] == "Home mTLS (ha.a.b.com)"
    assert profile["PayloadVersion"] == 1
    (payload,) = profile["PayloadContent"]
    assert payload["PayloadType"] == "com.apple.certificate.pkcs12"
    assert payload["PayloadCertificateFileName"] == "ha.p12"
    assert payload["PayloadContent"] == p12
    assert payload["PayloadUUID"] != profile["PayloadUUID"]


def test_apple_profile_embeds_base64_and_pinned_uuids(tmp_path: Path) -> None:
    xml = render_apple_profile(
        session=_session(tmp_path),
        p12_bytes=b"abc",
        payload_uuid="PAYLOAD-UUID",
        profile_uuid="PROFILE-UUID",
    )

    assert f"<data>{base64.b64encode(b'abc').decode()}</data>" in xml
    assert "<string>PAYLOAD-UUID</string>" in xml
    assert "<string>PROFILE-UUID</string>" in xml
    assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')


def test_uuids_differ_between_renders(tmp_path: Path) -> None:
    first = plistlib.loads(render_apple_profile(session=_session(tmp_path), p12_bytes=b"x").encode())
    second = plistlib.loads(render_apple_profile(session=_session(tmp_path), p12_bytes=b"x").encode())
    assert first["PayloadUUID"] != second["PayloadUUID"]


def test_compose_mounts_computed_paths(tmp_path: Path) -> None:
    srv, cert = tmp_path / "filebrowser" / "srv", tmp_path / "filebrowser" / "cert"

    compose = render_compose(srv_dir=srv, cert_dir=cert)

    assert "image: filebrowser/filebrowser:latest" in compose
    assert f"- {srv.resolve()}:/srv" in compose
    assert f"- {cert.resolve()}:/certs:ro" in compose
    assert '- "8443:443"' in compose
    assert "- PUID=1000" in compose


def test_portal_settings_document() -> None:
    settings = json.loads(render_portal_settings())

    assert settings["port"] == 443
    assert settings["address"] == "0.0.0.0"
    assert settings["cert"] == "/certs/fb-cert.pem"
    assert settings["key"] == "/certs/fb-key.pem"
    assert settings["root"] == "/srv"
    assert settings["auth"] == {"method": "json"}
    assert settings["branding"] == {"name": "Secure Setup Portal", "disableExternal": True}

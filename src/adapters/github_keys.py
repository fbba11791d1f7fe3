"""Published SSH key lookup on the code-hosting service.

GitHub serves every user's public keys at `<base>/<username>.keys`, one
`<type> <base64>` per line (comments stripped), which is enough to confirm a
freshly registered key without an API token.
"""

from __future__ import annotations

from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings


def key_fingerprint_material(public_key_line: str) -> str:
    """`<type> <base64>` of an OpenSSH public key line (comment dropped)."""

    parts = public_key_line.strip().split()
    return " ".join(parts[:2])


async def fetch_published_keys(
    username: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[str]:
    settings = settings or AppSettings()
    url = f"{settings.github_base_url.rstrip('/')}/{quote(username.strip())}.keys"
    async with build_async_client(settings, transport=transport) as client:
        response = await client.get(url)
    response.raise_for_status()
    return [line.strip() for line in response.text.splitlines() if line.strip()]


async def is_key_published(
    username: str,
    public_key_line: str,
    *,
    settings: AppSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> bool:
    wanted = key_fingerprint_material(public_key_line)
    published = await fetch_published_keys(username, settings=settings, transport=transport)
    return any(key_fingerprint_material(line) == wanted for line in published)

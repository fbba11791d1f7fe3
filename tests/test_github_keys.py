from __future__ import annotations

import asyncio

import httpx
import pytest

from adapters.github_keys import fetch_published_keys, is_key_published, key_fingerprint_material
from core.config import AppSettings


def _settings() -> AppSettings:
    return AppSettings(_env_file=None, github_base_url="https://git.example.test/")


def test_fingerprint_material_drops_comment() -> None:
    assert key_fingerprint_material("ssh-rsa AAAA me@host\n") == "ssh-rsa AAAA"


def test_fetch_published_keys_parses_lines() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert str(request.url) == "https://git.example.test/someone.keys"
        assert request.headers["User-Agent"].startswith("secure-infra/")
        return httpx.Response(200, text="ssh-rsa AAAA\n\nssh-ed25519 BBBB\n")

    keys = asyncio.run(
        fetch_published_keys("someone", settings=_settings(), transport=httpx.MockTransport(handler))
    )

    assert keys == ["ssh-rsa AAAA", "ssh-ed25519 BBBB"]


def test_is_key_published_false_when_absent() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(200, text="ssh-rsa CCCC\n"))

    assert asyncio.run(is_key_published("u", "ssh-rsa AAAA me", settings=_settings(), transport=transport)) is False


def test_unknown_user_raises_http_error() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(404, text="Not Found"))

    with pytest.raises(httpx.HTTPStatusError):
        asyncio.run(fetch_published_keys("ghost", settings=_settings(), transport=transport))

from __future__ import annotations

import pytest

from core.domain.models import reverse_dns_identifier
from core.domain.modes import OperationMode


@pytest.mark.parametrize(
    ("choice", "expected"),
    [
        ("1", OperationMode.FULL_SETUP),
        ("2", OperationMode.MTLS_ONLY),
        (" 3 ", OperationMode.APPLE_PROFILE_ONLY),
        ("4", OperationMode.PORTAL_ONLY),
        ("5", OperationMode.GITHUB_SSH),
        ("mtls_only", OperationMode.MTLS_ONLY),
        ("github-ssh", OperationMode.GITHUB_SSH),
    ],
)
def test_from_choice_maps_valid_answers(choice: str, expected: OperationMode) -> None:
    assert OperationMode.from_choice(choice) is expected


@pytest.mark.parametrize("choice", ["", None, "0", "6", "-1", "abc", "2.5"])
def test_invalid_choice_falls_back_to_full_setup(choice: str | None) -> None:
    assert OperationMode.from_choice(choice) is OperationMode.FULL_SETUP
    assert OperationMode.parse(choice) is None


def test_domain_requirements() -> None:
    assert not OperationMode.GITHUB_SSH.needs_domain
    assert all(mode.needs_domain for mode in OperationMode if mode is not OperationMode.GITHUB_SSH)
    assert {m for m in OperationMode if m.needs_portal_subdomain} == {
        OperationMode.FULL_SETUP,
        OperationMode.PORTAL_ONLY,
    }


def test_every_mode_has_a_label() -> None:
    assert all(mode.label() for mode in OperationMode)


@pytest.mark.parametrize(
    ("domain", "expected"),
    [
        ("a.b.com", "com.b.a.mtls"),
        ("example.com", "com.example.mtls"),
        ("example.com.", "com.example.mtls"),
        ("home", "home.mtls"),
    ],
)
def test_reverse_dns_identifier(domain: str, expected: str) -> None:
    assert reverse_dns_identifier(domain) == expected

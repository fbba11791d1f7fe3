"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Validation at the edge of the interactive answers (empty domain, stray
  whitespace) without scattering checks through the topics.
- Derived artifact paths live next to the data they come from, so every topic
  agrees on the on-disk layout.

Note:
- These models describe *what* gets produced, not *how* (that is the adapters').
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.modes import OperationMode


CERT_DIR_NAME = "tunnel_cert"
PORTAL_DIR_NAME = "filebrowser"

CLIENT_KEY = "client.key"
CLIENT_CSR = "client.csr"
CLIENT_PEM = "client.pem"
DEVICE_P12 = "device-cert.p12"
APPLE_PROFILE = "apple-secure.mobileconfig"

PORTAL_CERT = "fb-cert.pem"
PORTAL_KEY = "fb-key.pem"


def reverse_dns_identifier(domain: str, suffix: str = "mtls") -> str:
    """Reverse the domain labels and append `suffix` (`a.b.com` -> `com.b.a.mtls`)."""

    labels = [label for label in domain.strip().strip(".").split(".") if label]
    return ".".join([*reversed(labels), suffix])


class WriteOutcome(str, Enum):
    """What happened to an artifact path."""

    WRITTEN = "written"
    OVERWRITTEN = "overwritten"
    KEPT = "kept"


class SessionConfig(BaseModel):
    """Per-run configuration gathered from the operator.

    Frozen once built: topics read it, they never change it.
    """

    model_config = ConfigDict(frozen=True)

    mode: OperationMode = Field(
        default=OperationMode.FULL_SETUP,
        description="Selected operation mode.",
    )
    work_dir: Path = Field(
        ...,
        description="Root directory for every generated artifact.",
    )
    domain: str = Field(
        default="",
        max_length=253,
        description="Root domain (e.g. example.com). Empty only for SSH onboarding.",
    )
    ha_subdomain: str = Field(
        default="ha",
        min_length=1,
        max_length=63,
        description="Subdomain bound to the tunnel mTLS identity.",
    )
    portal_subdomain: str = Field(
        default="setup",
        min_length=1,
        max_length=63,
        description="Subdomain used for the file portal certificate.",
    )

    @field_validator("domain", "ha_subdomain", "portal_subdomain")
    @classmethod
    def _normalise_label(cls, value: str) -> str:
        value = value.strip().lower().strip(".")
        if any(ch.isspace() for ch in value):
            raise ValueError("must not contain whitespace")
        return value

    @field_validator("work_dir")
    @classmethod
    def _expand_work_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def common_name(self) -> str:
        return f"{self.ha_subdomain}.{self.domain}"

    @property
    def portal_common_name(self) -> str:
        return f"{self.portal_subdomain}.{self.domain}"

    @property
    def profile_identifier(self) -> str:
        return reverse_dns_identifier(self.domain)

    # tunnel_cert/
    @property
    def cert_dir(self) -> Path:
        return self.work_dir / CERT_DIR_NAME

    @property
    def key_path(self) -> Path:
        return self.cert_dir / CLIENT_KEY

    @property
    def csr_path(self) -> Path:
        return self.cert_dir / CLIENT_CSR

    @property
    def pem_path(self) -> Path:
        return self.cert_dir / CLIENT_PEM

    @property
    def p12_path(self) -> Path:
        return self.cert_dir / DEVICE_P12

    @property
    def profile_path(self) -> Path:
        return self.cert_dir / APPLE_PROFILE

    # filebrowser/
    @property
    def portal_dir(self) -> Path:
        return self.work_dir / PORTAL_DIR_NAME

    @property
    def portal_conf_dir(self) -> Path:
        return self.portal_dir / "conf"

    @property
    def portal_srv_dir(self) -> Path:
        return self.portal_dir / "srv"

    @property
    def portal_cert_dir(self) -> Path:
        return self.portal_dir / "cert"

    @property
    def compose_path(self) -> Path:
        return self.portal_conf_dir / "docker-compose.yml"

    @property
    def settings_path(self) -> Path:
        return self.portal_conf_dir / "settings.json"

    @property
    def portal_cert_path(self) -> Path:
        return self.portal_cert_dir / PORTAL_CERT

    @property
    def portal_key_path(self) -> Path:
        return self.portal_cert_dir / PORTAL_KEY


class SshOnboarding(BaseModel):
    """Answers for the SSH onboarding branch (independent of the domain)."""

    model_config = ConfigDict(frozen=True)

    ssh_dir: Path = Field(..., description="Directory holding the key pair.")
    key_name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Private key file name; the public key adds `.pub`.",
    )
    email: str = Field(
        default="",
        description="Identifier embedded as the key comment.",
    )

    @field_validator("key_name")
    @classmethod
    def _plain_file_name(cls, value: str) -> str:
        value = value.strip()
        if not value or "/" in value or "\\" in value:
            raise ValueError("key name must be a plain file name")
        return value

    @field_validator("ssh_dir")
    @classmethod
    def _expand_ssh_dir(cls, value: Path) -> Path:
        return value.expanduser()

    @property
    def private_key_path(self) -> Path:
        return self.ssh_dir / self.key_name

    @property
    def public_key_path(self) -> Path:
        return self.ssh_dir / f"{self.key_name}.pub"

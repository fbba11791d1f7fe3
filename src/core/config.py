"""Core configuration.

Why here:
- Centralises environment variables (pydantic-settings) without leaking them
  into the CLI layer.
- Lets adapters (openssl, ssh, HTTP) read defaults consistently.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no extra dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "secure-infra"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "secure-infra"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "secure-infra"
    return Path.home() / ".config" / "secure-infra"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user's global .env."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# secure-infra user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Central application settings.

    Every value here is only a *default* for an interactive prompt; the
    operator's answers always win for the current run.
    """

    model_config = SettingsConfigDict(
        env_prefix="SECURE_INFRA_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first (dev), then the per-user config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    default_work_dir: Path = Field(
        default_factory=lambda: Path.home() / "git",
        description="Working directory offered as the default at the prompt.",
    )
    default_ha_subdomain: str = Field(
        default="ha",
        min_length=1,
        description="Subdomain used for the tunnel (mTLS) identity.",
    )
    default_portal_subdomain: str = Field(
        default="setup",
        min_length=1,
        description="Subdomain used for the file portal.",
    )

    rsa_key_bits: int = Field(
        default=2048,
        ge=2048,
        le=8192,
        description="Size of the mTLS client RSA key.",
    )
    portal_cert_days: int = Field(
        default=365,
        ge=1,
        le=3650,
        description="Validity of the portal's self-signed certificate (days).",
    )
    p12_password: str = Field(
        default="",
        description="Export password for the PKCS#12 bundle (empty = no password).",
    )

    ssh_dir: Path = Field(
        default_factory=lambda: Path.home() / ".ssh",
        description="Directory where SSH keys are generated.",
    )
    ssh_key_name: str = Field(
        default="github-key",
        min_length=1,
        description="File name of the generated SSH private key.",
    )
    ssh_key_type: str = Field(
        default="rsa",
        min_length=1,
        description="Key type passed to ssh-keygen -t.",
    )
    ssh_key_bits: int = Field(
        default=2048,
        ge=1024,
        le=16384,
        description="Key size passed to ssh-keygen -b.",
    )
    ssh_email: str = Field(
        default="",
        description="Comment/identifier embedded in the SSH public key.",
    )

    github_base_url: str = Field(
        default="https://github.com",
        min_length=8,
        description="Code-hosting base URL (key settings page and published keys).",
    )
    http_timeout_seconds: float = Field(
        default=15.0,
        gt=0,
        description="Timeout per HTTP request (seconds).",
    )
    user_agent: str = Field(
        default="secure-infra/0.1 (+https://local)",
        min_length=1,
        description="User-Agent for HTTP requests.",
    )
    tool_timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Timeout for non-interactive external tools (None = wait).",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level for the Rich log handler.",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value

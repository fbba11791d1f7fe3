from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from core.config import AppSettings, write_user_env_vars


def test_write_user_env_vars_merges_existing(tmp_path: Path) -> None:
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# comment\nSECURE_INFRA_SSH_KEY_NAME='old'\nSECURE_INFRA_SSH_EMAIL=me@example.com\n", encoding="utf-8")

    write_user_env_vars({"SECURE_INFRA_SSH_KEY_NAME": "new", "SECURE_INFRA_DEFAULT_HA_SUBDOMAIN": "ha2"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert "SECURE_INFRA_SSH_KEY_NAME=new" in lines
    assert "SECURE_INFRA_SSH_EMAIL=me@example.com" in lines
    assert "SECURE_INFRA_DEFAULT_HA_SUBDOMAIN=ha2" in lines


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SECURE_INFRA_DEFAULT_WORK_DIR", str(tmp_path))
    monkeypatch.setenv("SECURE_INFRA_RSA_KEY_BITS", "4096")

    settings = AppSettings(_env_file=None)

    assert settings.default_work_dir == tmp_path
    assert settings.rsa_key_bits == 4096
    assert settings.default_ha_subdomain == "ha"
    assert settings.default_portal_subdomain == "setup"


def test_settings_env_file(tmp_path: Path) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("SECURE_INFRA_SSH_KEY_NAME=from-file\n", encoding="utf-8")

    assert AppSettings(_env_file=env_file).ssh_key_name == "from-file"


def test_log_level_is_normalised_and_checked(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SECURE_INFRA_LOG_LEVEL", "info")
    assert AppSettings(_env_file=None).log_level == "INFO"

    monkeypatch.setenv("SECURE_INFRA_LOG_LEVEL", "verbose")
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)

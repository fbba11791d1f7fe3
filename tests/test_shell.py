from __future__ import annotations

import sys

import pytest

from adapters.shell import SubprocessRunner
from core.errors import ExternalToolError


def test_missing_binary_is_reported() -> None:
    with pytest.raises(ExternalToolError) as excinfo:
        SubprocessRunner().run(["secure-infra-no-such-binary-xyz"])
    assert "not installed" in str(excinfo.value)


def test_non_zero_exit_carries_stderr() -> None:
    cmd = [sys.executable, "-c", "import sys; sys.stderr.write('bad key'); sys.exit(3)"]
    with pytest.raises(ExternalToolError) as excinfo:
        SubprocessRunner().run(cmd)
    assert excinfo.value.returncode == 3
    assert "bad key" in str(excinfo.value)


def test_input_and_environment_are_forwarded() -> None:
    cmd = [
        sys.executable,
        "-c",
        "import os, sys; sys.stdout.write(sys.stdin.read() + os.environ['SECURE_INFRA_TEST'])",
    ]
    result = SubprocessRunner(timeout=30).run(cmd, input_text="csr-", extra_env={"SECURE_INFRA_TEST": "ok"})
    assert result.stdout == "csr-ok"


def test_empty_command_rejected() -> None:
    with pytest.raises(ExternalToolError):
        SubprocessRunner().run([])

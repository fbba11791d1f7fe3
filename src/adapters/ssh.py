"""OpenSSH tooling: ssh-keygen, ssh-add, ssh-copy-id."""

from __future__ import annotations

import sys
from pathlib import Path

from core.interfaces.runner import CommandRunner


class SshTools:
    def __init__(self, runner: CommandRunner, *, platform: str | None = None) -> None:
        self._runner = runner
        self._platform = platform or sys.platform

    def generate_key(
        self,
        private_key_path: Path,
        *,
        comment: str,
        key_type: str = "rsa",
        bits: int = 2048,
    ) -> None:
        """Create an unencrypted key pair at `private_key_path` (+ `.pub`).

        ssh-keygen asks interactively before replacing a key, so any previous
        pair is removed first; callers decide beforehand whether that is allowed.
        """

        private_key_path.parent.mkdir(parents=True, exist_ok=True)
        private_key_path.unlink(missing_ok=True)
        Path(f"{private_key_path}.pub").unlink(missing_ok=True)

        cmd = ["ssh-keygen", "-t", key_type]
        if key_type in ("rsa", "ecdsa"):
            cmd += ["-b", str(bits)]
        cmd += ["-f", str(private_key_path), "-C", comment, "-N", ""]
        self._runner.run(cmd)

    def add_to_agent(self, private_key_path: Path) -> None:
        if self._platform == "darwin":
            self._runner.run(["ssh-add", "--apple-use-keychain", str(private_key_path)], interactive=True)
        else:
            self._runner.run(["ssh-add", str(private_key_path)], interactive=True)

    def copy_id(self, private_key_path: Path, remote: str) -> None:
        """Append the public key to `remote`'s authorized_keys (prompts for a password)."""

        self._runner.run(["ssh-copy-id", "-i", str(private_key_path), remote], interactive=True)

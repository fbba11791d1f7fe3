"""Key/certificate generation delegated to the `openssl` binary.

Only argument construction lives here. Output is never parsed; a failing
invocation surfaces as `ExternalToolError` from the runner.
"""

from __future__ import annotations

from pathlib import Path

from core.interfaces.runner import CommandRunner

OPENSSL = "openssl"

# The PKCS#12 export password travels through the environment so it never
# shows up in the process list.
P12_PASSWORD_ENV = "SECURE_INFRA_P12_EXPORT_PASSWORD"


class OpenSSL:
    def __init__(self, runner: CommandRunner, *, binary: str = OPENSSL) -> None:
        self._runner = runner
        self._binary = binary

    def generate_key(self, output_path: Path, *, bits: int = 2048) -> None:
        self._runner.run([self._binary, "genrsa", "-out", str(output_path), str(bits)])

    def generate_csr(self, key_path: Path, output_path: Path, common_name: str) -> None:
        self._runner.run(
            [
                self._binary,
                "req",
                "-new",
                "-key",
                str(key_path),
                "-out",
                str(output_path),
                "-subj",
                f"/CN={common_name}",
            ]
        )

    def generate_p12(
        self,
        output_path: Path,
        key_path: Path,
        pem_path: Path,
        *,
        password: str = "",
    ) -> None:
        self._runner.run(
            [
                self._binary,
                "pkcs12",
                "-export",
                "-out",
                str(output_path),
                "-inkey",
                str(key_path),
                "-in",
                str(pem_path),
                "-passout",
                f"env:{P12_PASSWORD_ENV}",
            ],
            extra_env={P12_PASSWORD_ENV: password},
        )

    def generate_self_signed(
        self,
        cert_path: Path,
        key_path: Path,
        common_name: str,
        *,
        days: int = 365,
    ) -> None:
        """Unencrypted RSA-4096 key plus a self-signed SHA-256 certificate."""

        self._runner.run(
            [
                self._binary,
                "req",
                "-x509",
                "-newkey",
                "rsa:4096",
                "-keyout",
                str(key_path),
                "-out",
                str(cert_path),
                "-sha256",
                "-days",
                str(days),
                "-nodes",
                "-subj",
                f"/CN={common_name}",
            ]
        )

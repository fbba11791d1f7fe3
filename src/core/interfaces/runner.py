"""External tool invocation contract.

Rules:
- Arguments are passed as a list, never through a shell.
- A missing binary or a non-zero exit raises `core.errors.ExternalToolError`.
"""

from __future__ import annotations

import subprocess
from typing import Mapping, Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunner(Protocol):
    def run(
        self,
        cmd: Sequence[str],
        *,
        input_text: str | None = None,
        extra_env: Mapping[str, str] | None = None,
        interactive: bool = False,
    ) -> subprocess.CompletedProcess:
        """Run `cmd`; `interactive` leaves stdio attached to the terminal."""

        ...

    def which(self, binary: str) -> str | None:
        """Resolve `binary` on PATH (None when absent)."""

        ...

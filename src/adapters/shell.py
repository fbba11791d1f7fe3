"""Subprocess wrapper.

Why a wrapper:
- Standardises shell=False, timeouts, DEBUG logging of every command line and
  the translation of failures into `ExternalToolError`.
- Services receive it through the `CommandRunner` protocol, so tests never
  spawn real tools.
"""

from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from typing import Mapping, Sequence

from core.errors import ExternalToolError

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """`CommandRunner` backed by `subprocess.run`."""

    def __init__(self, *, timeout: float | None = None) -> None:
        self._timeout = timeout

    def which(self, binary: str) -> str | None:
        return shutil.which(binary)

    def run(
        self,
        cmd: Sequence[str],
        *,
        input_text: str | None = None,
        extra_env: Mapping[str, str] | None = None,
        interactive: bool = False,
    ) -> subprocess.CompletedProcess:
        if not cmd:
            raise ExternalToolError(cmd, "empty command")

        argv = [str(part) for part in cmd]
        logger.debug("run: %s", shlex.join(argv))

        env = None
        if extra_env:
            env = {**os.environ, **extra_env}

        try:
            result = subprocess.run(
                argv,
                input=input_text,
                capture_output=not interactive,
                text=True,
                env=env,
                # Interactive tools (ssh-copy-id) wait on the operator.
                timeout=None if interactive else self._timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ExternalToolError(argv, f"'{argv[0]}' is not installed or not on PATH.") from exc
        except subprocess.TimeoutExpired as exc:
            raise ExternalToolError(argv, f"'{argv[0]}' timed out after {exc.timeout}s.") from exc

        if result.returncode != 0:
            detail = (result.stderr or "").strip() if not interactive else ""
            message = f"'{argv[0]}' exited with code {result.returncode}"
            if detail:
                message += f": {detail}"
            raise ExternalToolError(argv, message, returncode=result.returncode)

        return result

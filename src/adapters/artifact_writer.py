"""Idempotent artifact writer.

Policy (shared by file writes and tool-generated artifacts):
- absent path -> write;
- present but empty -> overwrite without asking;
- present with content -> ask override/keep, default keep. Keep leaves the file
  authoritative for the rest of the run.
"""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console

from adapters.terminal import print_success, print_warning
from core.domain.models import WriteOutcome
from core.interfaces.prompter import Prompter

logger = logging.getLogger(__name__)

OVERRIDE_PROMPT = "Override (o) or keep & use existing (k)? [o/k]"


def has_content(path: Path) -> bool:
    """True when `path` is a file holding something other than whitespace."""

    if not path.is_file():
        return False
    data = path.read_bytes()
    return bool(data.strip())


class ArtifactWriter:
    """Writes artifacts without silently clobbering the operator's files."""

    def __init__(self, prompter: Prompter, console: Console) -> None:
        self._prompter = prompter
        self._console = console

    def confirm_override(self, path: Path) -> bool:
        """Ask whether an existing, non-empty `path` may be replaced."""

        print_warning(self._console, f"File exists with content: {path}")
        answer = self._prompter.ask(OVERRIDE_PROMPT, "k")
        return answer.strip().lower() in ("o", "override")

    def should_generate(self, path: Path) -> bool:
        """Decide whether an external tool may (re)create `path`."""

        if not has_content(path):
            return True
        if self.confirm_override(path):
            return True
        logger.info("keeping existing %s", path)
        return False

    def write(self, path: Path, content: str | bytes) -> WriteOutcome:
        existed = path.exists()
        if has_content(path) and not self.confirm_override(path):
            logger.info("keeping existing %s", path)
            return WriteOutcome.KEPT

        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")

        print_success(self._console, f"Saved: {path}")
        return WriteOutcome.OVERWRITTEN if existed else WriteOutcome.WRITTEN

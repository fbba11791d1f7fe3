"""Best-effort clipboard copy.

A missing or failing clipboard tool is never fatal: callers get `False` and
tell the operator to copy by hand.
"""

from __future__ import annotations

import logging
import os
import sys

from core.errors import ExternalToolError
from core.interfaces.runner import CommandRunner

logger = logging.getLogger(__name__)


def clipboard_command(runner: CommandRunner, platform: str | None = None) -> list[str] | None:
    """Pick the clipboard tool for `platform` (None when nothing usable is installed)."""

    platform = platform or sys.platform
    if platform == "darwin":
        return ["pbcopy"]
    if platform.startswith("win"):
        return ["clip"]
    if platform.startswith("linux"):
        if os.environ.get("WAYLAND_DISPLAY") and runner.which("wl-copy"):
            return ["wl-copy"]
        if runner.which("xclip"):
            return ["xclip", "-selection", "clipboard"]
        if runner.which("xsel"):
            return ["xsel", "--clipboard", "--input"]
    return None


def copy_to_clipboard(content: str, runner: CommandRunner, *, platform: str | None = None) -> bool:
    """Copy `content` to the system clipboard; True on success."""

    cmd = clipboard_command(runner, platform)
    if cmd is None:
        logger.info("no clipboard tool available for %s", platform or sys.platform)
        return False
    try:
        runner.run(cmd, input_text=content.strip())
    except ExternalToolError as exc:
        logger.warning("clipboard copy failed: %s", exc)
        return False
    return True

"""Fatal error hierarchy.

Anything raised from here aborts the run: the CLI prints the message and exits
non-zero. Recoverable problems (clipboard, agent, remote push) never use these
classes; they are reported as warnings where they happen.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class ProvisioningError(Exception):
    """Base class for errors that stop the wizard."""


class MissingInputError(ProvisioningError):
    """A mandatory interactive answer was left empty."""


class MissingPrerequisiteError(ProvisioningError):
    """Files a step depends on are not on disk."""

    def __init__(self, directory: Path, missing: Sequence[str], hint: str | None = None) -> None:
        self.directory = directory
        self.missing = list(missing)
        self.hint = hint
        lines = [f"Missing prerequisite files in {directory}:"]
        lines.extend(f"    - {name}" for name in self.missing)
        if hint:
            lines.append(hint)
        super().__init__("\n".join(lines))


class ExternalToolError(ProvisioningError):
    """An external program was not found or exited with an error."""

    def __init__(self, command: Sequence[str], message: str, returncode: int | None = None) -> None:
        self.command = list(command)
        self.returncode = returncode
        super().__init__(message)


class InvalidInputError(ProvisioningError):
    """An interactive answer was present but unusable."""

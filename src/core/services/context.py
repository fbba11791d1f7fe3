"""Shared collaborators for the wizard's topics.

Topics receive one `WizardContext` instead of a handful of loose arguments;
tests build it with a scripted prompter and a fake runner.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

import httpx
from rich.console import Console

from adapters.artifact_writer import ArtifactWriter
from adapters.openssl import OpenSSL
from adapters.ssh import SshTools
from core.config import AppSettings
from core.domain.models import SessionConfig
from core.interfaces.prompter import Prompter
from core.interfaces.runner import CommandRunner

SummaryRow = tuple[str, Path]


@dataclass
class WizardContext:
    settings: AppSettings
    prompter: Prompter
    runner: CommandRunner
    console: Console
    platform: str = sys.platform
    http_transport: httpx.AsyncBaseTransport | None = None
    writer: ArtifactWriter = field(init=False)

    def __post_init__(self) -> None:
        self.writer = ArtifactWriter(self.prompter, self.console)

    @property
    def openssl(self) -> OpenSSL:
        return OpenSSL(self.runner)

    @property
    def ssh(self) -> SshTools:
        return SshTools(self.runner, platform=self.platform)


@dataclass(frozen=True)
class Topic:
    """A named, selectable unit of work."""

    id: str
    name: str
    run: Callable[[WizardContext, SessionConfig], list[SummaryRow]]

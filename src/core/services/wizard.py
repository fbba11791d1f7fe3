"""Setup wizard orchestration.

The CLI delegates the whole interactive flow here: mode selection,
configuration gathering and the sequencing of topics per mode. Printing goes
through the Rich console of the context; errors that must stop the run are
raised as `ProvisioningError` and left to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from pydantic import ValidationError

from adapters.terminal import print_info, print_key_values, print_section, print_success
from core.domain.models import SessionConfig
from core.domain.modes import OperationMode
from core.errors import InvalidInputError, MissingInputError
from core.menu import Menu
from core.services.context import SummaryRow, Topic, WizardContext
from core.services.github_ssh import GITHUB_SSH_TOPIC
from core.services.mtls import APPLE_PROFILE_TOPIC, MTLS_TOPIC
from core.services.portal import PORTAL_TOPIC

logger = logging.getLogger(__name__)


MODE_TOPICS: dict[OperationMode, tuple[Topic, ...]] = {
    OperationMode.FULL_SETUP: (MTLS_TOPIC, APPLE_PROFILE_TOPIC, PORTAL_TOPIC),
    OperationMode.MTLS_ONLY: (MTLS_TOPIC,),
    OperationMode.APPLE_PROFILE_ONLY: (APPLE_PROFILE_TOPIC,),
    OperationMode.PORTAL_ONLY: (PORTAL_TOPIC,),
    OperationMode.GITHUB_SSH: (GITHUB_SSH_TOPIC,),
}


@dataclass
class WizardResult:
    """Outcome of one completed mode."""

    session: SessionConfig
    produced: list[SummaryRow] = field(default_factory=list)


class SetupWizard:
    def __init__(self, ctx: WizardContext, *, work_dir: Path | None = None) -> None:
        self._ctx = ctx
        self._work_dir = work_dir

    def build_menu(self) -> Menu:
        menu = Menu("Select Operation", self._ctx.prompter, self._ctx.console)
        for mode in OperationMode:
            menu.add_option(mode.label(), mode.value, lambda mode=mode: self.run_mode(mode))
        menu.add_option("Exit", "exit", self._exit)
        return menu

    def run(self, mode: OperationMode | None = None) -> WizardResult | None:
        """Run the wizard; `mode` skips the menu. None means the operator exited."""

        if mode is not None:
            return self.run_mode(mode)
        return self.build_menu().show()

    def _exit(self) -> None:
        print_info(self._ctx.console, "Exiting...")
        return None

    def gather_configuration(self, mode: OperationMode) -> SessionConfig:
        """Ask the questions `mode` needs; an empty mandatory answer aborts the run."""

        ctx, settings = self._ctx, self._ctx.settings
        default_dir = self._work_dir or settings.default_work_dir

        if not mode.needs_domain:
            return SessionConfig(mode=mode, work_dir=default_dir)

        print_section(ctx.console, "Configuration")
        print_info(ctx.console, f"Default working directory: {default_dir}")
        work_dir = ctx.prompter.ask("Use default or enter new path", str(default_dir))

        domain = ctx.prompter.ask("Root domain (e.g. example.com)")
        if not domain:
            raise MissingInputError("Domain name is required to proceed.")

        ha_subdomain = ctx.prompter.ask("Tunnel (HA) subdomain", settings.default_ha_subdomain)
        portal_subdomain = settings.default_portal_subdomain
        if mode.needs_portal_subdomain:
            portal_subdomain = ctx.prompter.ask("Portal subdomain", portal_subdomain)

        try:
            session = SessionConfig(
                mode=mode,
                work_dir=Path(work_dir or default_dir),
                domain=domain,
                ha_subdomain=ha_subdomain or settings.default_ha_subdomain,
                portal_subdomain=portal_subdomain or settings.default_portal_subdomain,
            )
        except ValidationError as exc:
            error = exc.errors()[0]
            field_name = ".".join(str(part) for part in error["loc"])
            raise InvalidInputError(f"Invalid {field_name}: {error['msg']}") from exc
        # Answers such as "." normalise to nothing.
        if not session.domain:
            raise MissingInputError("Domain name is required to proceed.")

        rows: list[tuple[str, object]] = [
            ("Mode", session.mode.value),
            ("Working directory", session.work_dir),
            ("Domain", session.domain),
            ("Tunnel identity", session.common_name),
        ]
        if mode.needs_portal_subdomain:
            rows.append(("Portal", session.portal_common_name))
        print_key_values(ctx.console, "Configuration locked", rows)
        return session

    def run_mode(self, mode: OperationMode) -> WizardResult:
        print_info(self._ctx.console, f"Selected Mode: {mode.value}")
        session = self.gather_configuration(mode)

        result = WizardResult(session=session)
        for topic in MODE_TOPICS[mode]:
            logger.debug("running topic %s", topic.id)
            result.produced.extend(topic.run(self._ctx, session))

        print_success(self._ctx.console, "Operation Complete")
        print_key_values(self._ctx.console, "Summary", result.produced)
        return result

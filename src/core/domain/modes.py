"""Operation modes for secure-infra.

The menu, the configuration phase and the summary all branch on the selected
mode; keeping the enumeration in the domain layer gives them one source of
truth without importing the CLI.
"""

from __future__ import annotations

from enum import Enum


class OperationMode(str, Enum):
    """Closed set of things a single run can do."""

    FULL_SETUP = "FULL_SETUP"
    MTLS_ONLY = "MTLS_ONLY"
    APPLE_PROFILE_ONLY = "APPLE_PROFILE_ONLY"
    PORTAL_ONLY = "PORTAL_ONLY"
    GITHUB_SSH = "GITHUB_SSH"

    @classmethod
    def default(cls) -> "OperationMode":
        """Mode used when the operator gives no (or an unusable) answer."""

        return cls.FULL_SETUP

    @classmethod
    def parse(cls, choice: str | None) -> "OperationMode | None":
        """Strict lookup by 1-based menu number or mode name (None if unknown)."""

        value = (choice or "").strip()
        by_name = value.upper().replace("-", "_")
        if by_name in cls.__members__:
            return cls[by_name]
        if value.isdigit():
            index = int(value) - 1
            modes = list(cls)
            if 0 <= index < len(modes):
                return modes[index]
        return None

    @classmethod
    def from_choice(cls, choice: str | None) -> "OperationMode":
        """Like `parse`, but anything unrecognised falls back to the default."""

        return cls.parse(choice) or cls.default()

    def label(self) -> str:
        """Human readable label for the menu."""

        return _LABELS[self]

    @property
    def needs_domain(self) -> bool:
        return self is not OperationMode.GITHUB_SSH

    @property
    def needs_portal_subdomain(self) -> bool:
        return self in (OperationMode.FULL_SETUP, OperationMode.PORTAL_ONLY)


_LABELS: dict[OperationMode, str] = {
    OperationMode.FULL_SETUP: "Full Setup (mTLS identity, Apple profile and portal)",
    OperationMode.MTLS_ONLY: "mTLS Identity Only (key & CSR)",
    OperationMode.APPLE_PROFILE_ONLY: "Apple Profile Only (rebuild .mobileconfig from existing keys)",
    OperationMode.PORTAL_ONLY: "Portal Configuration Only (Docker Compose & FileBrowser)",
    OperationMode.GITHUB_SSH: "GitHub SSH Onboarding",
}

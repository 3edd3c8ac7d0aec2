"""
Ordered upgrade preconditions with short-circuit failure reporting.

Each check pairs a predicate over machine state with a remediation message.
Checks run in order and stop at the first one that blocks, so a later check
never queries the host once an earlier one has failed. The message of the
failing check is returned as-is; the caller renders it and exits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from .config.settings import UpgradeGuardSettings
from .constants import MESSAGE_SEPARATOR
from .models import CheckOutcome
from .probes import HostProbes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PreconditionCheck:
    """A named predicate that is True when the upgrade must not proceed.

    ``message`` receives the current rerun command and returns the
    remediation text shown to the user.
    """

    name: str
    is_blocking: Callable[[], bool]
    message: Callable[[str], str]


def _join(*lines: str) -> str:
    return MESSAGE_SEPARATOR.join(lines)


def build_upgrade_checks(probes: HostProbes, settings: UpgradeGuardSettings) -> list[PreconditionCheck]:
    """Return the upgrade preconditions in evaluation order."""

    return [
        PreconditionCheck(
            name="unattended",
            is_blocking=probes.installation.is_unattended,
            message=lambda rerun: "`gvfs upgrade` is not supported in unattended mode",
        ),
        PreconditionCheck(
            name="development_version",
            is_blocking=probes.installation.is_development_version,
            message=lambda rerun: "Cannot run upgrade when development version of GVFS is installed.",
        ),
        PreconditionCheck(
            name="elevated",
            is_blocking=lambda: not probes.privilege.is_elevated(),
            message=lambda rerun: _join(
                "The installer needs to be run from an elevated command prompt.",
                f"Run `{rerun}` again from an elevated command prompt.",
            ),
        ),
        PreconditionCheck(
            name="upgrade_supported",
            is_blocking=lambda: not probes.driver.is_upgrade_supported(),
            message=lambda rerun: _join(
                "ProjFS configuration does not support `gvfs upgrade`.",
                "Check your team's documentation for how to upgrade.",
            ),
        ),
        PreconditionCheck(
            name="service_not_running",
            is_blocking=lambda: probes.service.service_state().installed_but_stopped,
            message=lambda rerun: _join(
                "GVFS Service is not running.",
                f"Run `{settings.service_start_command}` and run `{rerun}` again.",
            ),
        ),
    ]


class UpgradePreconditionValidator:
    def __init__(self, checks: Sequence[PreconditionCheck], rerun_command: str = "") -> None:
        self._checks = tuple(checks)
        self.rerun_command = rerun_command

    @property
    def checks(self) -> tuple[PreconditionCheck, ...]:
        return self._checks

    def validate_upgrade_allowed(self) -> CheckOutcome:
        """Run every check in order, stopping at the first that blocks."""
        for check in self._checks:
            if check.is_blocking():
                message = check.message(self.rerun_command)
                logger.error("Upgrade precondition %r failed: %s", check.name, message)
                return CheckOutcome.failed(message)
            logger.debug("Upgrade precondition %r passed", check.name)

        return CheckOutcome.ok()


__all__ = ["PreconditionCheck", "UpgradePreconditionValidator", "build_upgrade_checks"]

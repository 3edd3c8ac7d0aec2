"""
Installer pre-run checker.

Wires the precondition validator and the mount lifecycle coordinator to one
set of host capabilities and one rerun command. This is the surface an
installer calls before it replaces any files:

    checker = InstallerPreRunChecker.from_host()
    checker.rerun_command = "gvfs upgrade --confirm"
    outcome = checker.run_pre_upgrade_checks()
    if outcome.success:
        outcome = checker.unmount_all_repos()
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

from .command_invoker import ExternalCommandInvoker
from .config.settings import UpgradeGuardSettings, get_settings
from .models import CheckOutcome
from .mount_coordinator import MountLifecycleCoordinator
from .precondition_validator import UpgradePreconditionValidator, build_upgrade_checks
from .probes import HostProbes
from .process_census import ProcessCensus
from .retry_poller import RetryPoller

logger = logging.getLogger(__name__)


class InstallerPreRunChecker:
    def __init__(
        self,
        probes: HostProbes,
        settings: Optional[UpgradeGuardSettings] = None,
        *,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        self.settings = settings or get_settings()
        self._probes = probes
        self._validator = UpgradePreconditionValidator(build_upgrade_checks(probes, self.settings))
        self._census = ProcessCensus(probes.processes)
        self._poller = RetryPoller(
            self.settings.poll_attempts,
            self.settings.poll_interval_seconds,
            sleep=sleep,
        )
        self._coordinator: Optional[MountLifecycleCoordinator] = None
        self.rerun_command = self.settings.rerun_command

    @classmethod
    def from_host(cls, settings: Optional[UpgradeGuardSettings] = None) -> "InstallerPreRunChecker":
        from .host import build_host_probes

        resolved = settings or get_settings()
        return cls(build_host_probes(resolved), resolved)

    @property
    def rerun_command(self) -> str:
        return self._rerun_command

    @rerun_command.setter
    def rerun_command(self, value: str) -> None:
        self._rerun_command = value
        self._validator.rerun_command = value
        if self._coordinator is not None:
            self._coordinator.rerun_command = value

    def run_pre_upgrade_checks(self) -> CheckOutcome:
        logger.info("Checking if GVFS upgrade can be run on this machine.")

        outcome = self._validator.validate_upgrade_allowed()
        if outcome.success:
            logger.info("Successfully finished pre upgrade checks. Okay to run GVFS upgrade.")
        return outcome

    def mount_all_repos(self) -> CheckOutcome:
        return self._get_coordinator().mount_all()

    def unmount_all_repos(self) -> CheckOutcome:
        return self._get_coordinator().unmount_all()

    def _get_coordinator(self) -> MountLifecycleCoordinator:
        # Resolving the executable touches the search path, so it waits until
        # a mount operation is actually requested.
        if self._coordinator is None:
            invoker = ExternalCommandInvoker.for_executable(self._probes.commands, self.settings.executable_name)
            self._coordinator = MountLifecycleCoordinator(
                invoker,
                self._census,
                self._poller,
                rerun_command=self._rerun_command,
            )
        return self._coordinator


__all__ = ["InstallerPreRunChecker"]

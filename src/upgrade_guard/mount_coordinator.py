"""Unmount and remount every managed repository around an upgrade."""

from __future__ import annotations

import logging

from .command_invoker import ExternalCommandInvoker
from .constants import MESSAGE_SEPARATOR, MOUNT_ALL_ARGS, UNMOUNT_ALL_ARGS
from .models import CheckOutcome
from .process_census import ProcessCensus
from .retry_poller import RetryPoller

logger = logging.getLogger(__name__)


class MountLifecycleCoordinator:
    def __init__(
        self,
        invoker: ExternalCommandInvoker,
        census: ProcessCensus,
        poller: RetryPoller,
        rerun_command: str = "",
    ) -> None:
        self._invoker = invoker
        self._census = census
        self._poller = poller
        self.rerun_command = rerun_command

    def mount_all(self) -> CheckOutcome:
        outcome = self._invoker.invoke(MOUNT_ALL_ARGS)
        if not outcome.success:
            logger.error("mount_all: %s", outcome.error_message)
        return outcome

    def unmount_all(self) -> CheckOutcome:
        """Unmount all repositories and wait for blocking processes to exit."""
        logger.info("Unmounting any mounted GVFS repositories.")

        outcome = self._invoker.invoke(UNMOUNT_ALL_ARGS)
        if not outcome.success:
            logger.error("unmount_all: %s", outcome.error_message)
            return outcome

        # The mount process can still show up for a short while after the
        # unmount command returns.
        logger.info("Checking if GVFS or dependent processes are running.")
        result = self._poller.wait_until_clear(self._census.list_blocking_processes)
        if not result.resolved:
            names = ", ".join(sorted(result.last_observation))
            message = MESSAGE_SEPARATOR.join(
                [
                    "Blocking processes are running.",
                    f"Run `{self.rerun_command}` again after quitting these processes - {names}",
                ]
            )
            logger.error("unmount_all: %s", message)
            return CheckOutcome.failed(message)

        logger.info("Successfully unmounted repositories.")
        return CheckOutcome.ok()


__all__ = ["MountLifecycleCoordinator"]

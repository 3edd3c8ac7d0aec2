"""Report which blocking programs are currently running."""

from __future__ import annotations

import logging
from typing import AbstractSet

from .constants import BLOCKING_PROCESS_NAMES
from .probes import ProcessEnumerator

logger = logging.getLogger(__name__)


class ProcessCensus:
    """Filters the process table down to blocking program names.

    The caller's own process is never reported, even when it shares a name
    with a blocking program (the installer may itself run under ``bash``).
    """

    def __init__(
        self,
        enumerator: ProcessEnumerator,
        blocking_names: AbstractSet[str] = BLOCKING_PROCESS_NAMES,
    ) -> None:
        self._enumerator = enumerator
        self._blocking_names = frozenset(blocking_names)

    @property
    def blocking_names(self) -> frozenset[str]:
        return self._blocking_names

    def list_blocking_processes(self) -> frozenset[str]:
        """Return the distinct names of running blocking processes."""
        own_pid = self._enumerator.current_pid()
        matching_names = {
            observation.name
            for observation in self._enumerator.processes()
            if observation.pid != own_pid and observation.name in self._blocking_names
        }
        if matching_names:
            logger.debug("Blocking processes running: %s", ", ".join(sorted(matching_names)))
        return frozenset(matching_names)


__all__ = ["ProcessCensus"]

"""psutil-backed process table enumeration."""

from __future__ import annotations

import logging
import os
from typing import Iterator

import psutil

from ..errors import HostQueryError
from ..models import ProcessObservation

logger = logging.getLogger(__name__)

_WINDOWS_EXECUTABLE_SUFFIX = ".exe"


def _display_name(raw_name: str) -> str:
    """Return the process name without a Windows executable suffix."""
    if os.name == "nt" and raw_name.lower().endswith(_WINDOWS_EXECUTABLE_SUFFIX):
        return raw_name[: -len(_WINDOWS_EXECUTABLE_SUFFIX)]
    return raw_name


class PsutilProcessEnumerator:
    """Lists running processes as :class:`ProcessObservation` records."""

    def current_pid(self) -> int:
        return os.getpid()

    def processes(self) -> Iterator[ProcessObservation]:
        try:
            observations = list(self._scan())
        except (psutil.Error, OSError) as exc:
            raise HostQueryError.process_listing_failed() from exc
        logger.debug("Enumerated %d processes", len(observations))
        return iter(observations)

    def _scan(self) -> Iterator[ProcessObservation]:
        # process_iter skips processes that exit mid-scan and reports denied
        # attributes as None.
        for proc in psutil.process_iter(["pid", "name"]):
            name = proc.info.get("name")
            if not name:
                continue
            yield ProcessObservation(pid=int(proc.info["pid"]), name=_display_name(str(name)))


__all__ = ["PsutilProcessEnumerator"]

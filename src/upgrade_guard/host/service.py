"""Background service state lookup."""

from __future__ import annotations

import logging
import os
import shutil
from typing import Callable, Optional

import psutil

from ..errors import HostQueryError
from ..models import ServiceState
from ..probes import ProcessEnumerator
from .processes import PsutilProcessEnumerator

logger = logging.getLogger(__name__)


class PsutilServiceProbe:
    """Reports whether the named service is installed and running.

    On Windows the service control manager is asked directly. Elsewhere the
    service counts as installed when an executable of that name is on the
    search path, and as running when a process of that name exists.
    """

    def __init__(
        self,
        service_name: str,
        *,
        enumerator: Optional[ProcessEnumerator] = None,
        which: Optional[Callable[[str], Optional[str]]] = None,
    ) -> None:
        self.service_name = service_name
        self._enumerator = enumerator or PsutilProcessEnumerator()
        self._which = which or shutil.which

    def service_state(self) -> ServiceState:
        if os.name == "nt":
            return self._windows_service_state()
        return self._process_service_state()

    def _windows_service_state(self) -> ServiceState:
        try:
            service = psutil.win_service_get(self.service_name)  # type: ignore[attr-defined]
            status = service.status()
        except psutil.NoSuchProcess:
            # Not registered with the service manager.
            return ServiceState(installed=False, running=False)
        except (psutil.Error, OSError) as exc:
            raise HostQueryError.service_query_failed(self.service_name) from exc
        return ServiceState(installed=True, running=status == "running")

    def _process_service_state(self) -> ServiceState:
        installed = self._which(self.service_name) is not None
        running = any(observation.name == self.service_name for observation in self._enumerator.processes())
        logger.debug("Service %s installed=%s running=%s", self.service_name, installed, running)
        return ServiceState(installed=installed, running=running)


__all__ = ["PsutilServiceProbe"]

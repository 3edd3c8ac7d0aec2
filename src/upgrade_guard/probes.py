"""Capability interfaces the checker needs from the host platform.

Production implementations live in :mod:`upgrade_guard.host`; tests inject
fakes that satisfy the same protocols.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Sequence

from .models import ExternalInvocationResult, ProcessObservation, ServiceState


class PrivilegeProbe(Protocol):
    def is_elevated(self) -> bool:
        ...


class DriverProbe(Protocol):
    def is_upgrade_supported(self) -> bool:
        ...


class ServiceProbe(Protocol):
    def service_state(self) -> ServiceState:
        ...


class InstallationProbe(Protocol):
    def is_unattended(self) -> bool:
        ...

    def is_development_version(self) -> bool:
        ...


class ProcessEnumerator(Protocol):
    def current_pid(self) -> int:
        ...

    def processes(self) -> Iterable[ProcessObservation]:
        ...


class CommandRunner(Protocol):
    def run(self, command_path: str, args: Sequence[str]) -> ExternalInvocationResult:
        ...


@dataclass(frozen=True)
class HostProbes:
    """One implementation of every capability the checker queries."""

    privilege: PrivilegeProbe
    driver: DriverProbe
    service: ServiceProbe
    installation: InstallationProbe
    processes: ProcessEnumerator
    commands: CommandRunner


__all__ = [
    "CommandRunner",
    "DriverProbe",
    "HostProbes",
    "InstallationProbe",
    "PrivilegeProbe",
    "ProcessEnumerator",
    "ServiceProbe",
]

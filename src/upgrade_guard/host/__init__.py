"""Production implementations of the host capability protocols."""

from __future__ import annotations

from ..config.settings import UpgradeGuardSettings
from ..probes import HostProbes
from .command import SubprocessCommandRunner
from .driver import KernelModuleProbe
from .installation import EnvironmentInstallationProbe
from .privilege import HostPrivilegeProbe
from .processes import PsutilProcessEnumerator
from .service import PsutilServiceProbe


def build_host_probes(settings: UpgradeGuardSettings) -> HostProbes:
    enumerator = PsutilProcessEnumerator()
    return HostProbes(
        privilege=HostPrivilegeProbe(),
        driver=KernelModuleProbe(settings.driver_module),
        service=PsutilServiceProbe(settings.service_name, enumerator=enumerator),
        installation=EnvironmentInstallationProbe(settings.unattended_variable, settings.installed_version),
        processes=enumerator,
        commands=SubprocessCommandRunner(),
    )


__all__ = [
    "EnvironmentInstallationProbe",
    "HostPrivilegeProbe",
    "KernelModuleProbe",
    "PsutilProcessEnumerator",
    "PsutilServiceProbe",
    "SubprocessCommandRunner",
    "build_host_probes",
]

from __future__ import annotations

"""Typed settings for the upgrade guard, resolved from the environment."""


from dataclasses import dataclass
from functools import lru_cache
from importlib import metadata
from typing import Optional

from . import ConfigurationError, env_int, env_str

DISTRIBUTION_NAME = "upgrade-guard"

DEFAULT_EXECUTABLE_NAME = "gvfs"
DEFAULT_SERVICE_NAME = "GVFS.Service"
DEFAULT_UNATTENDED_VARIABLE = "GVFS_UNATTENDED"
DEFAULT_POLL_ATTEMPTS = 10
DEFAULT_POLL_INTERVAL_MS = 250


@dataclass(frozen=True)
class UpgradeGuardSettings:
    executable_name: str = DEFAULT_EXECUTABLE_NAME
    service_name: str = DEFAULT_SERVICE_NAME
    service_start_command: str = f"sc start {DEFAULT_SERVICE_NAME}"
    rerun_command: str = ""
    poll_attempts: int = DEFAULT_POLL_ATTEMPTS
    poll_interval_seconds: float = DEFAULT_POLL_INTERVAL_MS / 1000
    driver_module: Optional[str] = None
    installed_version: Optional[str] = None
    unattended_variable: str = DEFAULT_UNATTENDED_VARIABLE


def _distribution_version() -> Optional[str]:
    try:
        return metadata.version(DISTRIBUTION_NAME)
    except metadata.PackageNotFoundError:
        # Source checkout without an installed distribution.
        return None


def load_settings() -> UpgradeGuardSettings:
    """Build settings from ``UPGRADE_GUARD_*`` environment variables."""

    executable_name = env_str("UPGRADE_GUARD_EXECUTABLE", or_value=DEFAULT_EXECUTABLE_NAME)
    service_name = env_str("UPGRADE_GUARD_SERVICE_NAME", or_value=DEFAULT_SERVICE_NAME)
    service_start_command = env_str(
        "UPGRADE_GUARD_SERVICE_START_COMMAND", or_value=f"sc start {service_name}"
    )
    rerun_command = env_str("UPGRADE_GUARD_RERUN_COMMAND", or_value="")

    poll_attempts = env_int("UPGRADE_GUARD_POLL_ATTEMPTS", or_value=DEFAULT_POLL_ATTEMPTS)
    if poll_attempts < 1:
        raise ConfigurationError.invalid_value(
            "UPGRADE_GUARD_POLL_ATTEMPTS", poll_attempts, "At least one attempt is required"
        )

    poll_interval_ms = env_int("UPGRADE_GUARD_POLL_INTERVAL_MS", or_value=DEFAULT_POLL_INTERVAL_MS)
    if poll_interval_ms < 0:
        raise ConfigurationError.invalid_value(
            "UPGRADE_GUARD_POLL_INTERVAL_MS", poll_interval_ms, "Interval must be non-negative"
        )

    installed_version = env_str("UPGRADE_GUARD_INSTALLED_VERSION")
    if installed_version is None:
        installed_version = _distribution_version()

    return UpgradeGuardSettings(
        executable_name=executable_name,
        service_name=service_name,
        service_start_command=service_start_command,
        rerun_command=rerun_command,
        poll_attempts=int(poll_attempts),
        poll_interval_seconds=poll_interval_ms / 1000,
        driver_module=env_str("UPGRADE_GUARD_DRIVER_MODULE"),
        installed_version=installed_version,
        unattended_variable=env_str(
            "UPGRADE_GUARD_UNATTENDED_VARIABLE", or_value=DEFAULT_UNATTENDED_VARIABLE
        ),
    )


@lru_cache(maxsize=1)
def get_settings() -> UpgradeGuardSettings:
    return load_settings()


__all__ = ["UpgradeGuardSettings", "get_settings", "load_settings"]

"""Installation metadata: unattended mode and development builds."""

from __future__ import annotations

import logging
from typing import Optional

from ..config import ConfigurationError, env_bool

logger = logging.getLogger(__name__)


class EnvironmentInstallationProbe:
    def __init__(self, unattended_variable: str, installed_version: Optional[str]) -> None:
        self.unattended_variable = unattended_variable
        self.installed_version = installed_version

    def is_unattended(self) -> bool:
        return bool(env_bool(self.unattended_variable, or_value=False))

    def is_development_version(self) -> bool:
        """Development builds carry major version 0 or no version at all."""
        if not self.installed_version:
            logger.debug("No installed version recorded; treating install as a development build")
            return True

        major = self.installed_version.strip().split(".", 1)[0]
        try:
            return int(major) == 0
        except ValueError as exc:
            raise ConfigurationError.invalid_format(
                "installed version", self.installed_version, "a dotted numeric version such as 1.0.19116.1"
            ) from exc


__all__ = ["EnvironmentInstallationProbe"]

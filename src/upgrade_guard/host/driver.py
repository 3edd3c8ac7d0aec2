"""Checks that the filesystem driver configuration allows in-place upgrades."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_MODULE_ROOT = Path("/sys/module")


class KernelModuleProbe:
    """Upgrade is supported when the configured kernel module is loaded.

    With no module configured there is nothing to verify.
    """

    def __init__(self, module_name: Optional[str] = None, module_root: Path = DEFAULT_MODULE_ROOT) -> None:
        self.module_name = module_name
        self.module_root = module_root

    def is_upgrade_supported(self) -> bool:
        if not self.module_name:
            return True
        loaded = (self.module_root / self.module_name).exists()
        if not loaded:
            logger.debug("Kernel module %s is not loaded under %s", self.module_name, self.module_root)
        return loaded


__all__ = ["KernelModuleProbe"]

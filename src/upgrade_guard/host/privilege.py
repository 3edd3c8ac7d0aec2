"""Elevation check for the current process."""

from __future__ import annotations

import os

from ..errors import HostQueryError


class HostPrivilegeProbe:
    def is_elevated(self) -> bool:
        """True for root on POSIX and for an administrator token on Windows."""
        if os.name == "nt":
            return self._is_windows_admin()
        return os.geteuid() == 0

    @staticmethod
    def _is_windows_admin() -> bool:
        import ctypes

        try:
            return bool(ctypes.windll.shell32.IsUserAnAdmin())  # type: ignore[attr-defined]
        except (AttributeError, OSError) as exc:
            raise HostQueryError.privilege_query_failed() from exc


__all__ = ["HostPrivilegeProbe"]

"""Error types raised when the host cannot be observed."""

from __future__ import annotations


class HostQueryError(RuntimeError):
    """Raised when an operating system query needed by a check fails.

    These are not retried: the checker cannot reason about machine state it
    cannot observe, so the failure propagates to the caller.
    """

    @classmethod
    def process_listing_failed(cls) -> "HostQueryError":
        """Create error for a failed process table enumeration."""
        return cls("Unable to enumerate running processes")

    @classmethod
    def privilege_query_failed(cls) -> "HostQueryError":
        """Create error for a failed elevation check."""
        return cls("Unable to determine whether the current process is elevated")

    @classmethod
    def service_query_failed(cls, service_name: str) -> "HostQueryError":
        """Create error for a failed service state lookup."""
        return cls(f"Unable to query the state of service {service_name!r}")

    @classmethod
    def executable_not_found(cls, executable_name: str) -> "HostQueryError":
        """Create error for an executable missing from the search path."""
        return cls(f"Could not find {executable_name!r} on the executable search path")

    @classmethod
    def launch_failed(cls, command_path: str) -> "HostQueryError":
        """Create error for a command that could not be started."""
        return cls(f"Failed to launch {command_path!r}")


__all__ = ["HostQueryError"]

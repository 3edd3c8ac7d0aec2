"""Fixed names and arguments shared by the checker components."""

from __future__ import annotations

# Processes that must not be running while the product is upgraded. Matching
# is exact and case-sensitive.
BLOCKING_PROCESS_NAMES: frozenset[str] = frozenset(
    {
        "GVFS",
        "GVFS.Mount",
        "git",
        "ssh-agent",
        "bash",
        "wish",
        "git-bash",
    }
)

MOUNT_ALL_ARGS = "service --mount-all"
UNMOUNT_ALL_ARGS = "service --unmount-all"

# Used when a failed command wrote nothing to stderr.
GENERIC_COMMAND_ERROR = "GVFS error"

MESSAGE_SEPARATOR = "\n"

__all__ = [
    "BLOCKING_PROCESS_NAMES",
    "GENERIC_COMMAND_ERROR",
    "MESSAGE_SEPARATOR",
    "MOUNT_ALL_ARGS",
    "UNMOUNT_ALL_ARGS",
]

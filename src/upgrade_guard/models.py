"""Value objects exchanged between the checker components."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CheckOutcome:
    """Result of a check: success, or failure with a user-facing message."""

    success: bool
    error_message: Optional[str] = None

    def __post_init__(self) -> None:
        if self.success and self.error_message is not None:
            raise ValueError("A successful outcome cannot carry an error message")
        if not self.success and not self.error_message:
            raise ValueError("A failed outcome requires an error message")

    @classmethod
    def ok(cls) -> "CheckOutcome":
        return cls(success=True)

    @classmethod
    def failed(cls, message: str) -> "CheckOutcome":
        return cls(success=False, error_message=message)


@dataclass(frozen=True)
class ProcessObservation:
    pid: int
    name: str


@dataclass(frozen=True)
class ExternalInvocationResult:
    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


@dataclass(frozen=True)
class ServiceState:
    installed: bool
    running: bool

    @property
    def installed_but_stopped(self) -> bool:
        return self.installed and not self.running


@dataclass(frozen=True)
class PollResult(Generic[T]):
    """Final state of a bounded wait.

    ``resolved`` is False when the attempt budget ran out while the
    observation was still blocking; ``last_observation`` is whatever the
    final attempt saw.
    """

    resolved: bool
    attempts: int
    last_observation: T


__all__ = [
    "CheckOutcome",
    "ExternalInvocationResult",
    "PollResult",
    "ProcessObservation",
    "ServiceState",
]

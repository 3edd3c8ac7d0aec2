"""Upgrade preconditions and mount lifecycle checks for GVFS installers."""

from .command_invoker import ExternalCommandInvoker, combine_error_text, resolve_executable
from .constants import BLOCKING_PROCESS_NAMES
from .errors import HostQueryError
from .models import CheckOutcome, ExternalInvocationResult, PollResult, ProcessObservation, ServiceState
from .mount_coordinator import MountLifecycleCoordinator
from .pre_run_checker import InstallerPreRunChecker
from .precondition_validator import PreconditionCheck, UpgradePreconditionValidator, build_upgrade_checks
from .probes import HostProbes
from .process_census import ProcessCensus
from .retry_poller import RetryPoller

__all__ = [
    "BLOCKING_PROCESS_NAMES",
    "CheckOutcome",
    "ExternalCommandInvoker",
    "ExternalInvocationResult",
    "HostProbes",
    "HostQueryError",
    "InstallerPreRunChecker",
    "MountLifecycleCoordinator",
    "PollResult",
    "PreconditionCheck",
    "ProcessCensus",
    "ProcessObservation",
    "RetryPoller",
    "ServiceState",
    "UpgradePreconditionValidator",
    "build_upgrade_checks",
    "combine_error_text",
    "resolve_executable",
]

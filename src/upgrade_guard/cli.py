"""Command line entry point for the upgrade guard.

Usage:
    upgrade-guard [--rerun-command CMD] check
    upgrade-guard unmount-all
    upgrade-guard mount-all
    upgrade-guard prepare        # check, then unmount-all
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Optional, Sequence

from .config import ConfigurationError
from .errors import HostQueryError
from .logging_config import setup_logging
from .models import CheckOutcome
from .pre_run_checker import InstallerPreRunChecker

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CHECK_FAILED = 1
EXIT_HOST_ERROR = 2


def _prepare(checker: InstallerPreRunChecker) -> CheckOutcome:
    outcome = checker.run_pre_upgrade_checks()
    if not outcome.success:
        return outcome
    return checker.unmount_all_repos()


_ACTIONS: dict[str, Callable[[InstallerPreRunChecker], CheckOutcome]] = {
    "check": InstallerPreRunChecker.run_pre_upgrade_checks,
    "unmount-all": InstallerPreRunChecker.unmount_all_repos,
    "mount-all": InstallerPreRunChecker.mount_all_repos,
    "prepare": _prepare,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="upgrade-guard",
        description="Verify a machine can be upgraded and unmount/remount managed repositories",
    )
    parser.add_argument("action", choices=sorted(_ACTIONS), help="Operation to run")
    parser.add_argument(
        "--rerun-command",
        default=None,
        help="Command line shown to the user when a condition must be fixed and the installer rerun",
    )
    parser.add_argument("--log-name", default=None, help="Also write logs to <log dir>/<name>.log")
    parser.add_argument("--verbose", action="store_true", help="Show debug output on the console")
    return parser


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    checker_factory: Callable[[], InstallerPreRunChecker] = InstallerPreRunChecker.from_host,
) -> int:
    """Run one action; failures reach the user through the console log handler."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_name, user_friendly=not args.verbose, verbose=args.verbose)
        checker = checker_factory()
        if args.rerun_command is not None:
            checker.rerun_command = args.rerun_command
        outcome = _ACTIONS[args.action](checker)
    except (HostQueryError, ConfigurationError) as exc:
        logger.exception("upgrade-guard %s could not inspect this machine: %s", args.action, exc)
        return EXIT_HOST_ERROR

    if not outcome.success:
        return EXIT_CHECK_FAILED
    return EXIT_OK


__all__ = ["build_parser", "main"]

"""Run the product's command line and turn its result into a CheckOutcome."""

from __future__ import annotations

import logging
import shlex
import shutil
from typing import Callable, Optional

from .constants import GENERIC_COMMAND_ERROR
from .errors import HostQueryError
from .models import CheckOutcome, ExternalInvocationResult
from .probes import CommandRunner

logger = logging.getLogger(__name__)


def resolve_executable(
    executable_name: str,
    *,
    which: Optional[Callable[[str], Optional[str]]] = None,
) -> str:
    """Locate *executable_name* on the search path.

    Raises:
        HostQueryError: If the executable cannot be found
    """
    finder = which or shutil.which
    resolved = finder(executable_name)
    if not resolved:
        raise HostQueryError.executable_not_found(executable_name)
    return resolved


def combine_error_text(result: ExternalInvocationResult) -> str:
    """Build the user-facing message for a failed invocation.

    stderr is preferred; when the command wrote nothing there a generic
    message stands in. Any stdout is appended after a ``". "`` separator.
    """
    errors = result.stderr.strip()
    output = result.stdout.strip()
    error_text = errors if errors else GENERIC_COMMAND_ERROR
    if output:
        return f"{error_text}. {output}"
    return error_text


class ExternalCommandInvoker:
    """Synchronously runs one executable with varying argument strings."""

    def __init__(self, runner: CommandRunner, command_path: str) -> None:
        self._runner = runner
        self.command_path = command_path

    @classmethod
    def for_executable(
        cls,
        runner: CommandRunner,
        executable_name: str,
        *,
        which: Optional[Callable[[str], Optional[str]]] = None,
    ) -> "ExternalCommandInvoker":
        return cls(runner, resolve_executable(executable_name, which=which))

    def invoke(self, args: str) -> CheckOutcome:
        """Run the command with *args* and report success iff it exited 0."""
        argv = shlex.split(args)
        result = self._runner.run(self.command_path, argv)
        if result.succeeded:
            return CheckOutcome.ok()

        logger.debug("%s %s exited with code %s", self.command_path, args, result.exit_code)
        return CheckOutcome.failed(combine_error_text(result))


__all__ = ["ExternalCommandInvoker", "combine_error_text", "resolve_executable"]

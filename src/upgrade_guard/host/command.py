"""Subprocess-backed command runner."""

from __future__ import annotations

import logging
import subprocess
from typing import Sequence

from ..errors import HostQueryError
from ..models import ExternalInvocationResult

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Runs a command to completion with fully buffered output."""

    def run(self, command_path: str, args: Sequence[str]) -> ExternalInvocationResult:
        argv = [command_path, *args]
        logger.info("CMD %s", subprocess.list2cmdline(argv))
        try:
            proc = subprocess.run(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise HostQueryError.launch_failed(command_path) from exc

        if proc.stdout:
            logger.debug("STDOUT %s", proc.stdout.strip())
        if proc.stderr:
            logger.debug("STDERR %s", proc.stderr.strip())

        return ExternalInvocationResult(
            exit_code=proc.returncode,
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
        )


__all__ = ["SubprocessCommandRunner"]

"""Bounded fixed-interval wait for an asynchronous side effect to land.

An external "stop" command can return before the processes it stops have
actually exited. :class:`RetryPoller` re-observes the condition a fixed
number of times with a fixed pause between attempts. There is no backoff and
no early cancellation; the worst case is ``max_attempts * interval_seconds``.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, TypeVar

from .models import PollResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_INTERVAL_SECONDS = 0.25


class RetryPoller:
    def __init__(
        self,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        interval_seconds: float = DEFAULT_INTERVAL_SECONDS,
        *,
        sleep: Callable[[float], Any] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1 (got {max_attempts})")
        if interval_seconds < 0:
            raise ValueError(f"interval_seconds must be non-negative (got {interval_seconds})")
        self.max_attempts = max_attempts
        self.interval_seconds = interval_seconds
        self._sleep = sleep

    def wait_until_clear(
        self,
        observe: Callable[[], T],
        is_blocking: Callable[[T], bool] = bool,
    ) -> PollResult[T]:
        """Observe until ``is_blocking`` turns false or the budget runs out.

        Args:
            observe: Takes a fresh look at the condition
            is_blocking: Decides whether an observation still blocks

        Returns:
            PollResult carrying the last observation
        """
        for attempt in range(1, self.max_attempts + 1):
            observation = observe()
            if not is_blocking(observation):
                logger.debug("Condition cleared after %d attempt(s)", attempt)
                return PollResult(resolved=True, attempts=attempt, last_observation=observation)
            self._sleep(self.interval_seconds)

        logger.debug("Condition still blocking after %d attempts", self.max_attempts)
        return PollResult(resolved=False, attempts=self.max_attempts, last_observation=observation)


__all__ = ["DEFAULT_INTERVAL_SECONDS", "DEFAULT_MAX_ATTEMPTS", "RetryPoller"]

"""Tests for the bounded convergence wait."""

import pytest

from tests.helpers.fakes import RecordingSleep
from upgrade_guard.retry_poller import DEFAULT_INTERVAL_SECONDS, DEFAULT_MAX_ATTEMPTS, RetryPoller


class _ScriptedPredicate:
    def __init__(self, *answers):
        self._answers = list(answers)
        self.calls = 0

    def __call__(self):
        answer = self._answers[min(self.calls, len(self._answers) - 1)]
        self.calls += 1
        return answer


def test_defaults():
    poller = RetryPoller()
    assert poller.max_attempts == DEFAULT_MAX_ATTEMPTS == 10
    assert poller.interval_seconds == DEFAULT_INTERVAL_SECONDS == 0.25


def test_clear_on_first_attempt_evaluates_once():
    sleep = RecordingSleep()
    predicate = _ScriptedPredicate(False)

    result = RetryPoller(sleep=sleep).wait_until_clear(predicate)

    assert result.resolved is True
    assert result.attempts == 1
    assert predicate.calls == 1
    assert sleep.delays == []


def test_always_blocking_exhausts_budget():
    sleep = RecordingSleep()
    predicate = _ScriptedPredicate(True)

    result = RetryPoller(sleep=sleep).wait_until_clear(predicate)

    assert result.resolved is False
    assert result.attempts == 10
    assert predicate.calls == 10
    assert sleep.delays == [0.25] * 10
    assert sum(sleep.delays) == pytest.approx(2.5)


def test_clears_midway():
    sleep = RecordingSleep()
    observe = _ScriptedPredicate({"git"}, {"git"}, set())

    result = RetryPoller(sleep=sleep).wait_until_clear(observe)

    assert result.resolved is True
    assert result.attempts == 3
    assert result.last_observation == set()
    assert len(sleep.delays) == 2


def test_custom_blocking_rule_keeps_last_observation():
    observe = _ScriptedPredicate(5, 4, 3)

    result = RetryPoller(3, 0.0, sleep=RecordingSleep()).wait_until_clear(observe, is_blocking=lambda n: n > 3)

    assert result.resolved is True
    assert result.last_observation == 3


@pytest.mark.parametrize(("attempts", "interval"), [(0, 0.25), (-1, 0.25), (1, -0.1)])
def test_invalid_budget_rejected(attempts, interval):
    with pytest.raises(ValueError):
        RetryPoller(attempts, interval)

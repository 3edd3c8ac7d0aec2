"""Tests for running the product command and combining its error output."""

import pytest

from tests.helpers.fakes import FakeCommandRunner
from upgrade_guard.command_invoker import ExternalCommandInvoker, combine_error_text, resolve_executable
from upgrade_guard.errors import HostQueryError
from upgrade_guard.models import ExternalInvocationResult


def _result(exit_code: int, stdout: str = "", stderr: str = "") -> ExternalInvocationResult:
    return ExternalInvocationResult(exit_code=exit_code, stdout=stdout, stderr=stderr)


class TestCombineErrorText:
    def test_fallback_when_stderr_empty(self) -> None:
        assert combine_error_text(_result(1, stdout="nothing to do")) == "GVFS error. nothing to do"

    def test_stderr_and_stdout(self) -> None:
        text = combine_error_text(_result(1, stdout="2 repos skipped", stderr="mount failed"))
        assert text == "mount failed. 2 repos skipped"

    def test_stderr_only(self) -> None:
        assert combine_error_text(_result(1, stderr="permission denied\n")) == "permission denied"

    def test_nothing_written(self) -> None:
        assert combine_error_text(_result(3)) == "GVFS error"


class TestExternalCommandInvoker:
    def test_zero_exit_succeeds(self) -> None:
        runner = FakeCommandRunner(_result(0, stdout="all repos mounted"))
        invoker = ExternalCommandInvoker(runner, "/usr/local/bin/gvfs")

        outcome = invoker.invoke("service --mount-all")

        assert outcome.success is True
        assert outcome.error_message is None
        assert runner.calls == [("/usr/local/bin/gvfs", ["service", "--mount-all"])]

    def test_non_zero_exit_fails_with_combined_text(self) -> None:
        runner = FakeCommandRunner(_result(1, stderr="permission denied"))
        invoker = ExternalCommandInvoker(runner, "gvfs")

        outcome = invoker.invoke("service --unmount-all")

        assert outcome.success is False
        assert outcome.error_message == "permission denied"
        assert "1" not in outcome.error_message


def test_resolve_executable_uses_search_path():
    assert resolve_executable("gvfs", which=lambda name: f"/opt/gvfs/bin/{name}") == "/opt/gvfs/bin/gvfs"


def test_resolve_executable_missing_raises():
    with pytest.raises(HostQueryError, match="gvfs"):
        resolve_executable("gvfs", which=lambda name: None)


def test_for_executable_resolves_path():
    invoker = ExternalCommandInvoker.for_executable(FakeCommandRunner(), "gvfs", which=lambda name: "/bin/gvfs")

    assert invoker.command_path == "/bin/gvfs"

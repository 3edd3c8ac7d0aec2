"""Tests for the blocking process census."""

import pytest

from tests.helpers.fakes import OWN_PID, FakeProcessEnumerator, processes
from upgrade_guard.constants import BLOCKING_PROCESS_NAMES
from upgrade_guard.errors import HostQueryError
from upgrade_guard.models import ProcessObservation
from upgrade_guard.process_census import ProcessCensus


def test_reports_only_blocking_names():
    census = ProcessCensus(FakeProcessEnumerator(processes("git", "python", "GVFS.Mount", "sshd")))

    assert census.list_blocking_processes() == frozenset({"git", "GVFS.Mount"})


def test_duplicate_names_collapse():
    census = ProcessCensus(FakeProcessEnumerator(processes("git", "git", "bash", "git")))

    assert census.list_blocking_processes() == frozenset({"git", "bash"})


def test_excludes_own_process_but_not_namesakes():
    table = [
        ProcessObservation(pid=OWN_PID, name="bash"),
        ProcessObservation(pid=OWN_PID + 1, name="bash"),
    ]
    census = ProcessCensus(FakeProcessEnumerator(table))

    assert census.list_blocking_processes() == frozenset({"bash"})


def test_own_process_alone_is_not_reported():
    census = ProcessCensus(FakeProcessEnumerator([ProcessObservation(pid=OWN_PID, name="GVFS")]))

    assert census.list_blocking_processes() == frozenset()


def test_matching_is_case_sensitive():
    census = ProcessCensus(FakeProcessEnumerator(processes("Git", "BASH", "gvfs")))

    assert census.list_blocking_processes() == frozenset()


def test_repeated_calls_on_static_table_are_identical():
    enumerator = FakeProcessEnumerator(processes("git", "wish", "notepad"))
    census = ProcessCensus(enumerator)

    first = census.list_blocking_processes()
    second = census.list_blocking_processes()

    assert first == second == frozenset({"git", "wish"})
    assert enumerator.calls == 2


def test_custom_blocking_names():
    census = ProcessCensus(FakeProcessEnumerator(processes("git", "scalar")), blocking_names={"scalar"})

    assert census.blocking_names == frozenset({"scalar"})
    assert census.list_blocking_processes() == frozenset({"scalar"})


def test_enumeration_failure_propagates():
    class _BrokenEnumerator(FakeProcessEnumerator):
        def processes(self):
            raise HostQueryError.process_listing_failed()

    census = ProcessCensus(_BrokenEnumerator())

    with pytest.raises(HostQueryError):
        census.list_blocking_processes()


def test_blocking_name_set_is_immutable():
    assert isinstance(BLOCKING_PROCESS_NAMES, frozenset)
    assert BLOCKING_PROCESS_NAMES == {"GVFS", "GVFS.Mount", "git", "ssh-agent", "bash", "wish", "git-bash"}

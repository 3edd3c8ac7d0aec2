"""Tests for logging setup."""

import logging

import pytest

from upgrade_guard.config import ConfigurationError
from upgrade_guard.logging_config import setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    saved_level = root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if isinstance(handler, logging.FileHandler):
            handler.close()
    root.setLevel(saved_level)


def test_console_only_without_log_name():
    assert setup_logging() is None

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.INFO


def test_user_friendly_console_shows_warnings_only():
    setup_logging(user_friendly=True)

    assert logging.getLogger().handlers[0].level == logging.WARNING


def test_file_handler_written_to_log_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("UPGRADE_GUARD_LOG_DIR", str(tmp_path / "logs"))

    log_path = setup_logging("upgrade")
    logging.getLogger("upgrade_guard.test").info("Unmounting any mounted GVFS repositories.")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_path == tmp_path / "logs" / "upgrade.log"
    assert "Unmounting any mounted GVFS repositories." in log_path.read_text()


def test_repeated_setup_replaces_handlers():
    setup_logging()
    setup_logging(verbose=True)

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].level == logging.DEBUG


def test_user_friendly_console_writes_stderr_without_traceback(capsys):
    setup_logging(user_friendly=True)

    try:
        raise RuntimeError("process table unavailable")
    except RuntimeError:
        logging.getLogger("upgrade_guard.test").exception("Could not list processes")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == "Could not list processes\n"


def test_unusable_log_dir_raises_configuration_error(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    monkeypatch.setenv("UPGRADE_GUARD_LOG_DIR", str(blocker / "logs"))

    with pytest.raises(ConfigurationError, match="UPGRADE_GUARD_LOG_DIR"):
        setup_logging("upgrade")

    assert len(logging.getLogger().handlers) == 1

"""
Centralized logging configuration for the upgrade guard.

Provides a single setup_logging function that configures the root logger with:
- Console output on stderr (message-only, WARNING+ and without tracebacks in
  user-friendly mode)
- Optional file output to {log dir}/{log_name}.log, truncated on each run
"""

import logging
import logging.handlers
import sys
import threading
from pathlib import Path
from typing import Optional

from .config import ConfigurationError, env_bool, env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)
_UNKNOWN_LOGGER_NAME = "<unknown>"
_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_TECHNICAL_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger, logger_name: Optional[str] = None) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as e:
            safe_name = logger_name if logger_name else _UNKNOWN_LOGGER_NAME
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", safe_name, e)


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    _close_handlers(root_logger)
    root_logger.handlers = []


class _MessageOnlyFormatter(logging.Formatter):
    """Formats just the message; tracebacks are left to the log file."""

    def __init__(self) -> None:
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        saved = record.exc_info, record.exc_text, record.stack_info
        record.exc_info, record.exc_text, record.stack_info = None, None, None
        try:
            return super().format(record)
        finally:
            record.exc_info, record.exc_text, record.stack_info = saved


def _build_console_handler(user_friendly: bool, verbose: bool) -> logging.Handler:
    formatter: logging.Formatter
    if user_friendly:
        formatter = _MessageOnlyFormatter()
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _TECHNICAL_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)

    if verbose:
        console_handler.setLevel(logging.DEBUG)
    elif user_friendly:
        console_handler.setLevel(logging.WARNING)
    else:
        console_handler.setLevel(logging.INFO)

    return console_handler


def _resolve_log_directory() -> Path:
    configured = env_str("UPGRADE_GUARD_LOG_DIR")
    if configured:
        return Path(configured).expanduser()
    return Path.cwd() / "logs"


def _configure_file_handler(log_name: Optional[str]) -> Optional[logging.Handler]:
    if not log_name:
        return None

    logs_dir = _resolve_log_directory()
    log_path = logs_dir / f"{log_name}.log"
    file_mode = "a" if env_bool("UPGRADE_GUARD_LOG_APPEND", or_value=False) else "w"

    handler_cls = getattr(logging.handlers, "WatchedFileHandler", logging.FileHandler)
    try:
        logs_dir.mkdir(parents=True, exist_ok=True)
        file_handler = handler_cls(log_path, mode=file_mode)
    except OSError as exc:
        raise ConfigurationError.invalid_value("UPGRADE_GUARD_LOG_DIR", str(logs_dir), f"Cannot write {log_path.name}: {exc}") from exc
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _TECHNICAL_DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def setup_logging(log_name: Optional[str] = None, user_friendly: bool = False, verbose: bool = False) -> Optional[Path]:
    """Configure logging for the application.

    Returns the log file path when a file handler was installed.

    Raises:
        ConfigurationError: If the log file cannot be opened. The console
            handler is already installed by then, so the error can be logged.
    """

    with _config_lock:
        root_logger = logging.getLogger()
        _reset_all_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(user_friendly, verbose))
        root_logger.setLevel(logging.DEBUG)
        logging.getLogger("psutil").setLevel(logging.WARNING)

        file_handler = _configure_file_handler(log_name)
        if file_handler:
            root_logger.addHandler(file_handler)

    if file_handler is None:
        return None
    return Path(getattr(file_handler, "baseFilename"))


__all__ = ["setup_logging"]

"""Runtime helpers for working with environment-backed configuration.

Lookups consult the process environment first and then a ``.env`` file in
the working directory. The file is read once; :func:`clear_default_values`
forgets it so the next lookup reads it again.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from .errors import ConfigurationError

_TRUE_VALUES = {"1", "true", "t", "yes", "y", "on"}
_FALSE_VALUES = {"0", "false", "f", "no", "n", "off"}

_DOTENV_PATH = Path(".env")
_EXPORT_PREFIX = "export "

_DEFAULT_VALUES: dict[str, str] | None = None


def read_dotenv(path: Path) -> dict[str, str]:
    """Parse ``KEY=value`` lines from *path*.

    Blank lines, ``#`` comments and lines without ``=`` are ignored. A leading
    ``export`` is accepted and one layer of matching quotes is removed from
    the value. A missing file yields an empty mapping.

    Raises:
        ConfigurationError: If the file exists but cannot be read
    """
    if not path.exists():
        return {}
    try:
        text = path.read_text()
    except OSError as exc:
        raise ConfigurationError.invalid_value("dotenv file", str(path), "File could not be read") from exc

    values: dict[str, str] = {}
    for line in text.splitlines():
        entry = line.strip()
        if entry.startswith(_EXPORT_PREFIX):
            entry = entry[len(_EXPORT_PREFIX) :].lstrip()
        if not entry or entry.startswith("#") or "=" not in entry:
            continue
        key, _, value = entry.partition("=")
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
            value = value[1:-1]
        if key.strip():
            values[key.strip()] = value
    return values


def _load_default_values() -> dict[str, str]:
    global _DEFAULT_VALUES
    if _DEFAULT_VALUES is None:
        _DEFAULT_VALUES = read_dotenv(_DOTENV_PATH)
    return _DEFAULT_VALUES


def clear_default_values() -> None:
    """Forget values loaded from .env files so the next lookup re-reads them."""
    global _DEFAULT_VALUES
    _DEFAULT_VALUES = None


def _default_value(name: str) -> Optional[str]:
    """Return the default value for *name* if declared in config."""

    defaults = _load_default_values()
    return defaults.get(name)


def _normalize(value: str | None, *, strip: bool) -> str | None:
    if value is None:
        return None
    return value.strip() if strip else value


def env_str(
    name: str,
    or_value: str | None = None,
    *,
    required: bool = False,
    strip: bool = True,
    allow_blank: bool = False,
) -> str | None:
    """Fetch an environment variable as a string with validation."""

    value = _normalize(os.getenv(name), strip=strip)

    if value is None or (not allow_blank and value == ""):
        configured_default = _default_value(name)
        if configured_default is not None:
            value = _normalize(configured_default, strip=strip)

    if value is None or (not allow_blank and value == ""):
        if required:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    return value


def env_int(name: str, or_value: int | None = None, *, required: bool = False) -> int | None:
    """Fetch an environment variable and coerce it to ``int``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Environment variable {name!r} must be an integer (got {raw!r})") from exc


def env_bool(name: str, or_value: bool | None = None, *, required: bool = False) -> bool | None:
    """Fetch an environment variable and coerce it to ``bool``."""

    raw = env_str(name, strip=True, allow_blank=False)
    if raw is None:
        if required and or_value is None:
            raise ConfigurationError(f"Required environment variable {name!r} is not set")
        return or_value

    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Environment variable {name!r} must be a boolean (allowed: {_TRUE_VALUES | _FALSE_VALUES}, got {raw!r})")


__all__ = [
    "ConfigurationError",
    "clear_default_values",
    "env_bool",
    "env_int",
    "env_str",
    "read_dotenv",
]

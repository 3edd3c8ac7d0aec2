"""Shared configuration helpers and dataclasses."""

from .errors import ConfigurationError
from .runtime import (
    clear_default_values,
    env_bool,
    env_int,
    env_str,
)

__all__ = [
    "ConfigurationError",
    "clear_default_values",
    "env_bool",
    "env_int",
    "env_str",
]

"""nconfig - Flat key-value configuration store backed by INI-like text."""

from __future__ import annotations

# Core
from nconfig.store import ConfigStore
from nconfig.options import StoreOptions

# Codecs
from nconfig.codecs import ValueKind

# Errors
from nconfig.errors import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ErrorCodes,
    NConfigError,
    UnsupportedTypeError,
    ValueParseError,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ConfigStore",
    "StoreOptions",
    # Codecs
    "ValueKind",
    # Errors
    "ErrorCodes",
    "NConfigError",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ValueParseError",
    "UnsupportedTypeError",
]

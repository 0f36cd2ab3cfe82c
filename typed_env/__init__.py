"""
ABOUTME: Typed environment variable accessors with default fallback
ABOUTME: Parse failures are collected in an error log for later inspection instead of being raised
"""

__version__ = "0.1.0"

from .accessors import (
    EnvReader,
    all_errors,
    default_reader,
    first_error,
    get_bool,
    get_duration,
    get_float64,
    get_int,
    get_int64,
    get_string,
    get_uint,
    get_uint64,
    set_default_reader,
)
from .config import load_environment, raise_for_errors
from .error_log import ErrorLog
from .exceptions import ConfigError, ParseError

__all__ = [
    "EnvReader",
    "ErrorLog",
    "ConfigError",
    "ParseError",
    "get_bool",
    "get_duration",
    "get_float64",
    "get_int64",
    "get_int",
    "get_string",
    "get_uint64",
    "get_uint",
    "first_error",
    "all_errors",
    "default_reader",
    "set_default_reader",
    "load_environment",
    "raise_for_errors",
]

"""
ABOUTME: Typed accessors that read environment variables with default fallback
ABOUTME: Records parse failures in an ErrorLog instead of raising, so lookups never interrupt the caller
"""

import logging
import os
from datetime import timedelta
from typing import Callable, Mapping, Optional, TypeVar

from .error_log import ErrorLog
from .exceptions import ParseError
from .parsers import (
    parse_bool,
    parse_duration,
    parse_float64,
    parse_int,
    parse_int64,
    parse_uint,
    parse_uint64,
)

T = TypeVar("T")


class EnvReader:
    """Reads typed values from an environment mapping and logs parse failures."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        errors: Optional[ErrorLog] = None,
    ):
        """
        Create a reader over an environment mapping.

        Parameters:
            environ (Mapping[str, str], optional): Variables to read from. Defaults to os.environ, read live on every lookup.
            errors (ErrorLog, optional): Log that receives parse failures. A new log is created when omitted.
        """
        self.environ = os.environ if environ is None else environ
        self.errors = ErrorLog() if errors is None else errors

    def _lookup(
        self, name: str, default: T, parse: Callable[[str], T], type_label: str
    ) -> T:
        raw = self.environ.get(name, "")
        # unset and empty are the same
        if raw == "":
            return default
        try:
            return parse(raw)
        except ValueError:
            error = ParseError(name, type_label, raw)
            self.errors.append(error)
            logging.warning(f"{error}, using default {default!r}")
            return default

    def get_bool(self, name: str, default: bool) -> bool:
        return self._lookup(name, default, parse_bool, "bool")

    def get_duration(self, name: str, default: timedelta) -> timedelta:
        return self._lookup(name, default, parse_duration, "time.Duration")

    def get_float64(self, name: str, default: float) -> float:
        return self._lookup(name, default, parse_float64, "float64")

    def get_int64(self, name: str, default: int) -> int:
        return self._lookup(name, default, parse_int64, "int64")

    def get_int(self, name: str, default: int) -> int:
        return self._lookup(name, default, parse_int, "int")

    def get_string(self, name: str, default: str) -> str:
        # str() never raises, so nothing is recorded
        return self._lookup(name, default, str, "string")

    def get_uint64(self, name: str, default: int) -> int:
        return self._lookup(name, default, parse_uint64, "uint64")

    def get_uint(self, name: str, default: int) -> int:
        return self._lookup(name, default, parse_uint, "uint")

    def first_error(self) -> Optional[ParseError]:
        return self.errors.first()

    def all_errors(self) -> tuple[ParseError, ...]:
        return self.errors.all()


_default_reader = EnvReader()


def default_reader() -> EnvReader:
    """Return the process-wide reader used by the module-level accessors."""
    return _default_reader


def set_default_reader(reader: EnvReader) -> EnvReader:
    """Install a new process-wide reader and return the previous one."""
    global _default_reader
    previous = _default_reader
    _default_reader = reader
    return previous


def get_bool(name: str, default: bool) -> bool:
    """Read a boolean (1/0, t/f, true/false) from the environment."""
    return _default_reader.get_bool(name, default)


def get_duration(name: str, default: timedelta) -> timedelta:
    """Read a duration such as "1h30m" or "250ms" from the environment."""
    return _default_reader.get_duration(name, default)


def get_float64(name: str, default: float) -> float:
    return _default_reader.get_float64(name, default)


def get_int64(name: str, default: int) -> int:
    return _default_reader.get_int64(name, default)


def get_int(name: str, default: int) -> int:
    """Read a signed integer limited to the 32-bit range."""
    return _default_reader.get_int(name, default)


def get_string(name: str, default: str) -> str:
    return _default_reader.get_string(name, default)


def get_uint64(name: str, default: int) -> int:
    return _default_reader.get_uint64(name, default)


def get_uint(name: str, default: int) -> int:
    """Read an unsigned integer limited to the 32-bit range."""
    return _default_reader.get_uint(name, default)


def first_error() -> Optional[ParseError]:
    """Return the first parse failure recorded by the default reader, or None."""
    return _default_reader.first_error()


def all_errors() -> tuple[ParseError, ...]:
    """Return every parse failure recorded by the default reader, oldest first."""
    return _default_reader.all_errors()

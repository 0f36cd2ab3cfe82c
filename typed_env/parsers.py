"""
ABOUTME: Text-to-value parsers for environment variable values
ABOUTME: Each parser returns the typed value or raises ValueError on malformed or out-of-range text
"""

import math
import re
from datetime import timedelta
from fractions import Fraction

INT32_MIN = -(1 << 31)
INT32_MAX = (1 << 31) - 1
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1
UINT32_MAX = (1 << 32) - 1
UINT64_MAX = (1 << 64) - 1

_TRUE_VALUES = frozenset({"1", "t", "true"})
_FALSE_VALUES = frozenset({"0", "f", "false"})

_SIGNED_DIGITS = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_DIGITS = re.compile(r"[0-9]+")
_DECIMAL_FLOAT = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOATS = frozenset({"inf", "infinity", "nan"})

# Nanoseconds per unit
_DURATION_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 60 * 60 * 1_000_000_000,
}
_DURATION_PART = re.compile(
    r"([0-9]*\.?[0-9]*)(ns|us|µs|μs|ms|s|m|h)"
)


def parse_bool(text: str) -> bool:
    """Parse 1/0, t/f or true/false in any letter case."""
    lowered = text.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"invalid boolean: {text!r}")


def _parse_bounded(text: str, pattern: re.Pattern, low: int, high: int) -> int:
    if not pattern.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if value < low or value > high:
        raise ValueError(f"integer out of range [{low}, {high}]: {text!r}")
    return value


def parse_int(text: str) -> int:
    """Parse a signed decimal integer that fits in 32 bits."""
    return _parse_bounded(text, _SIGNED_DIGITS, INT32_MIN, INT32_MAX)


def parse_int64(text: str) -> int:
    """Parse a signed decimal integer that fits in 64 bits."""
    return _parse_bounded(text, _SIGNED_DIGITS, INT64_MIN, INT64_MAX)


def parse_uint(text: str) -> int:
    """Parse an unsigned decimal integer that fits in 32 bits. No sign is accepted."""
    return _parse_bounded(text, _UNSIGNED_DIGITS, 0, UINT32_MAX)


def parse_uint64(text: str) -> int:
    """Parse an unsigned decimal integer that fits in 64 bits. No sign is accepted."""
    return _parse_bounded(text, _UNSIGNED_DIGITS, 0, UINT64_MAX)


def parse_float64(text: str) -> float:
    """
    Parse a 64-bit floating point number.

    Accepts decimal and exponent notation, hexadecimal floats (``0x1p-2``) and
    the special values inf, infinity and nan with an optional sign. Surrounding
    whitespace and digit separators are rejected, as is a finite literal too
    large to represent.

    Raises:
        ValueError: If the text is not a float literal or overflows.
    """
    unsigned = text[1:] if text[:1] in ("+", "-") else text
    if unsigned.lower() in _SPECIAL_FLOATS:
        return float(text)

    if _DECIMAL_FLOAT.fullmatch(text):
        value = float(text)
    elif _HEX_FLOAT.fullmatch(text):
        try:
            value = float.fromhex(text)
        except OverflowError as e:
            raise ValueError(f"float out of range: {text!r}") from e
    else:
        raise ValueError(f"invalid float: {text!r}")

    if math.isinf(value):
        raise ValueError(f"float out of range: {text!r}")
    return value


def parse_duration(text: str) -> timedelta:
    """
    Parse a duration such as "300ms", "-1.5h" or "2h45m".

    A duration is an optional sign followed by one or more decimal numbers,
    each with a unit suffix. Valid units are "ns", "us" (or "µs"), "ms", "s",
    "m" and "h". The bare string "0" is also accepted. The total is computed
    in nanoseconds, must fit in a signed 64-bit count, and is returned
    truncated to timedelta's microsecond resolution.

    Raises:
        ValueError: If the text is not a duration or overflows.
    """
    rest = text
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration: {text!r}")

    total = Fraction(0)
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        if match is None or match.group(1) in ("", "."):
            raise ValueError(f"invalid duration: {text!r}")
        number, unit = match.groups()
        total += Fraction(number) * _DURATION_UNITS[unit]
        pos = match.end()

    nanos = int(total)
    limit = -INT64_MIN if negative else INT64_MAX
    if nanos > limit:
        raise ValueError(f"duration out of range: {text!r}")
    micros = nanos // 1_000
    return timedelta(microseconds=-micros if negative else micros)

"""
ABOUTME: Ordered record of environment variable parse failures
ABOUTME: Thread-safe append-only log with immutable snapshot queries
"""

import threading
from typing import Iterator, Optional

from .exceptions import ParseError


class ErrorLog:
    """Append-only, insertion-ordered log of ParseError records."""

    def __init__(self):
        self._errors: list[ParseError] = []
        self._lock = threading.Lock()

    def append(self, error: ParseError) -> None:
        with self._lock:
            self._errors.append(error)

    def first(self) -> Optional[ParseError]:
        """Return the earliest recorded failure, or None if the log is empty."""
        with self._lock:
            return self._errors[0] if self._errors else None

    def all(self) -> tuple[ParseError, ...]:
        """
        Return a snapshot of every recorded failure in the order they occurred.

        The returned tuple is a copy and is not affected by later appends.
        """
        with self._lock:
            return tuple(self._errors)

    def clear(self) -> None:
        """Drop all recorded failures. Intended for test isolation only."""
        with self._lock:
            self._errors.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[ParseError]:
        return iter(self.all())

    def __repr__(self) -> str:
        return f"ErrorLog({list(self.all())!r})"

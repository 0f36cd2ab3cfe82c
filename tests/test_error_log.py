"""
ABOUTME: Unit tests for the ErrorLog container
ABOUTME: Tests ordering, snapshots, clearing and concurrent appends
"""

import threading

from typed_env.error_log import ErrorLog
from typed_env.exceptions import ParseError


class TestErrorLog:
    """Test ErrorLog class."""

    def test_empty_log(self):
        """Test that a new log has no failures."""
        log = ErrorLog()
        assert log.first() is None
        assert log.all() == ()
        assert len(log) == 0
        assert not log

    def test_append_keeps_insertion_order(self):
        """Test that failures are returned oldest first."""
        log = ErrorLog()
        first = ParseError("A", "int", "x")
        second = ParseError("B", "bool", "y")
        log.append(first)
        log.append(second)

        assert log.first() is first
        assert log.all() == (first, second)
        assert list(log) == [first, second]
        assert log

    def test_all_returns_snapshot(self):
        """Test that a snapshot does not grow with later appends."""
        log = ErrorLog()
        log.append(ParseError("A", "int", "x"))
        snapshot = log.all()
        log.append(ParseError("B", "int", "y"))

        assert len(snapshot) == 1
        assert len(log.all()) == 2

    def test_clear(self):
        """Test that clear empties the log."""
        log = ErrorLog()
        log.append(ParseError("A", "int", "x"))
        log.clear()
        assert log.first() is None
        assert len(log) == 0

    def test_concurrent_appends_are_all_recorded(self):
        """Test that appends from several threads are not lost."""
        log = ErrorLog()

        def worker(n):
            for i in range(200):
                log.append(ParseError(f"T{n}", "int", str(i)))

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(log) == 1600
